# tests/services/test_user_service.py
"""Tests for UserService and AuthService."""

from uuid import uuid4

import pytest

from bloglist.db import Database
from bloglist.errors import (
    DuplicateEntryError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationFailedError,
)
from bloglist.managers.token_manager import create_access_token
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, UserService


class TestUserService:
    async def test_register_hashes_password(self, database: Database) -> None:
        async with database.transaction() as session:
            service = UserService(UserRepository(session), BlogRepository(session))
            user = await service.register({"username": "monni", "name": "Jutta Jei", "password": "salasana"})

        assert user.username == "monni"
        assert user.blogs == []
        async with database.transaction() as session:
            stored = await UserRepository(session).get_by_username("monni")
        assert stored is not None
        assert stored.password_hash.startswith("$argon2")

    @pytest.mark.usefixtures("root_user")
    async def test_duplicate_username_is_rejected(self, database: Database) -> None:
        with pytest.raises(DuplicateEntryError, match="username must be unique") as exc_info:
            async with database.transaction() as session:
                service = UserService(UserRepository(session), BlogRepository(session))
                await service.register({"username": "root", "password": "salasana"})

        assert exc_info.value.status_code == 400
        assert exc_info.value.kind == "ValidationFailed"

    async def test_non_object_payload_is_rejected(self, database: Database) -> None:
        with pytest.raises(ValidationFailedError):
            async with database.transaction() as session:
                service = UserService(UserRepository(session), BlogRepository(session))
                await service.register(None)

    async def test_list_follows_owned_order(
        self,
        database: Database,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
    ) -> None:
        async with database.transaction() as session:
            owner = await UserRepository(session).get_by_id(root_user.id)
            assert owner is not None
            owner.blogs = list(reversed(owner.blogs))

        async with database.transaction() as session:
            service = UserService(UserRepository(session), BlogRepository(session))
            users = await service.list_users()

        assert [blog.id for blog in users[0].blogs] == [blog.id for blog in reversed(initial_blogs)]


class TestAuthService:
    @pytest.mark.usefixtures("root_user")
    async def test_authenticate_with_correct_password(self, database: Database) -> None:
        async with database.transaction() as session:
            user = await AuthService(UserRepository(session)).authenticate_user("root", "sekret")

        assert user.username == "root"

    @pytest.mark.usefixtures("root_user")
    @pytest.mark.parametrize(("username", "password"), [("root", "wrong"), ("ghost", "sekret"), ("root", None)])
    async def test_bad_credentials_are_rejected(
        self,
        database: Database,
        username: str,
        password: str | None,
    ) -> None:
        with pytest.raises(InvalidCredentialsError):
            async with database.transaction() as session:
                await AuthService(UserRepository(session)).authenticate_user(username, password)

    async def test_token_for_user_carries_identity(
        self,
        database: Database,
        root_user: UserDB,
    ) -> None:
        async with database.transaction() as session:
            service = AuthService(UserRepository(session))
            token = service.create_token_for_user(root_user)
            principal = await service.resolve_principal(token.access_token)

        assert token.username == "root"
        assert token.name == "Superuser"
        assert principal.user_id == root_user.id
        assert principal.username == "root"

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_invalid_token_is_unauthorized(self, database: Database, token: str | None) -> None:
        with pytest.raises(UnauthorizedError, match="token missing or invalid"):
            async with database.transaction() as session:
                await AuthService(UserRepository(session)).resolve_principal(token)

    async def test_token_of_unknown_user_is_unauthorized(self, database: Database) -> None:
        token = create_access_token(user_id=uuid4(), username="ghost")

        with pytest.raises(UnauthorizedError):
            async with database.transaction() as session:
                await AuthService(UserRepository(session)).resolve_principal(token)
