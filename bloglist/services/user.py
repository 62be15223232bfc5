"""User registration and listing."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from bloglist.errors import DuplicateEntryError
from bloglist.managers.password_manager import hash_password
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import (
    BlogSummary,
    UserResponse,
    UserWithBlogsResponse,
    validate_user_create,
)

logger = get_logger(__name__)


class UserService:
    """Service for registering users and listing them with their blogs."""

    def __init__(self, user_repo: UserRepository, blog_repo: BlogRepository) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def register(self, payload: Mapping[str, Any] | None) -> UserResponse:
        """
        Register a new user with an argon2-hashed password.

        Args:
            payload: Raw request fields (username, name, password)

        Returns:
            UserResponse: The created user, without credential material

        Raises:
            ValidationFailedError: If username or password is missing or too short
            DuplicateEntryError: If the username is already taken
        """
        user_create = validate_user_create(payload)

        if await self.user_repo.get_by_username(user_create.username):
            raise DuplicateEntryError(detail="username must be unique")

        password_hash = await hash_password(user_create.password.get_secret_value())
        user = await self.user_repo.create(
            username=user_create.username,
            name=user_create.name,
            password_hash=password_hash,
        )

        logger.info(f"User {user.username} registered")
        return UserResponse.model_validate(user)

    async def list_users(self) -> list[UserWithBlogsResponse]:
        """Return every user with the owned blogs populated in owned-list order."""
        users = await self.user_repo.get_all()
        owned_ids = {UUID(blog_id) for user in users for blog_id in user.blogs}
        blogs = await self.blog_repo.get_by_ids(owned_ids)

        return [
            UserWithBlogsResponse(
                id=user.id,
                username=user.username,
                name=user.name,
                blogs=[
                    BlogSummary.model_validate(blogs[UUID(blog_id)])
                    for blog_id in user.blogs
                    if UUID(blog_id) in blogs
                ],
            )
            for user in users
        ]
