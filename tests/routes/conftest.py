# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.db import Database
from bloglist.main import app
from bloglist.managers.rate_limiter import limiter
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client bound to the test database."""
    limiter.enabled = False
    app.state.database = database
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    del app.state.database
    limiter.enabled = True


@pytest.fixture
def root_token(root_user: UserDB) -> str:
    """Create an access token for the seeded root user."""
    return create_access_token(
        user_id=root_user.id,
        username=root_user.username,
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def other_token(other_user: UserDB) -> str:
    """Create an access token for the seeded second user."""
    return create_access_token(
        user_id=other_user.id,
        username=other_user.username,
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def auth_headers(root_token: str) -> dict[str, str]:
    """Create auth headers with the root user's token."""
    return {"Authorization": f"Bearer {root_token}"}


@pytest.fixture
def other_auth_headers(other_token: str) -> dict[str, str]:
    """Create auth headers with the second user's token."""
    return {"Authorization": f"Bearer {other_token}"}
