# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the test environment must be in place
# before bloglist is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist-tests"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["LIMITER_ENABLED"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from bloglist.db import Database  # noqa: E402
from bloglist.managers.password_manager import hash_password  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402
from bloglist.repositories import BlogRepository, UserRepository  # noqa: E402
from bloglist.schemas import BlogCreate  # noqa: E402

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


async def create_user(database: Database, username: str, name: str, password: str) -> UserDB:
    """Persist a user with a hashed password in its own transaction."""
    password_hash = await hash_password(password)
    async with database.transaction() as session:
        return await UserRepository(session).create(
            username=username,
            name=name,
            password_hash=password_hash,
        )


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory database with every table created."""
    db = Database("sqlite+aiosqlite://")
    await db.init()
    yield db
    await db.close()


@pytest.fixture
async def root_user(database: Database) -> UserDB:
    """Seeded owner of the initial blogs (password ``sekret``)."""
    return await create_user(database, "root", "Superuser", "sekret")


@pytest.fixture
async def other_user(database: Database) -> UserDB:
    """Seeded user owning nothing (password ``salainen``)."""
    return await create_user(database, "mluukkai", "Matti Luukkainen", "salainen")


@pytest.fixture
async def initial_blogs(database: Database, root_user: UserDB) -> list[BlogDB]:
    """The initial blogs, owned by ``root_user`` and recorded on its blog list."""
    blogs = []
    async with database.transaction() as session:
        blog_repo = BlogRepository(session)
        user_repo = UserRepository(session)
        owner = await user_repo.get_by_id(root_user.id)
        assert owner is not None
        for fields in INITIAL_BLOGS:
            blog = await blog_repo.create(BlogCreate(**fields), owner.id)
            await user_repo.append_blog(owner, blog.id)
            blogs.append(blog)
    return blogs
