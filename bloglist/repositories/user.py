"""User repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Besides plain CRUD it maintains the ordered ``blogs`` id list of a user.
    """

    model = UserDB

    async def create(self, username: str, name: str | None, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            name: Optional display name
            password_hash: Already hashed password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username already exists
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash, blogs=[])
        return await self._add_and_refresh(db_user, duplicate_detail="username must be unique")

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[UserDB]:
        """Get every user in storage order."""
        result = await self.session.execute(select(UserDB))
        return list(result.scalars().all())

    async def append_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Append a blog id to the user's owned list, keeping existing order.

        The list is reassigned rather than mutated so the JSON column is
        flagged dirty.
        """
        user.blogs = [*user.blogs, str(blog_id)]
        return await self._add_and_refresh(user)

    async def remove_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """Remove every occurrence of a blog id from the user's owned list."""
        user.blogs = [owned for owned in user.blogs if owned != str(blog_id)]
        return await self._add_and_refresh(user)
