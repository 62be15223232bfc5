"""Blog repository for database operations."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select

from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Ownership rules live in ``BlogService``; this class only reads and
    writes rows.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog owned by ``user_id``.

        Args:
            blog: Validated blog fields
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def get_all(self) -> list[BlogDB]:
        """Get every blog in storage order."""
        result = await self.session.execute(select(BlogDB))
        return list(result.scalars().all())

    async def get_all_with_owners(self) -> list[tuple[BlogDB, UserDB]]:
        """
        Get every blog joined with its owner, in storage order.

        Returns:
            list[tuple[BlogDB, UserDB]]: Blog/owner pairs
        """
        # pyrefly: ignore [bad-argument-type]
        statement = select(BlogDB, UserDB).join(UserDB, BlogDB.user_id == UserDB.id)
        result = await self.session.execute(statement)
        return [(blog, owner) for blog, owner in result.all()]

    async def get_by_ids(self, blog_ids: Iterable[UUID]) -> dict[UUID, BlogDB]:
        """
        Get blogs by a set of ids.

        Args:
            blog_ids: Ids to look up

        Returns:
            dict[UUID, BlogDB]: Found blogs keyed by id (missing ids are absent)
        """
        ids = list(blog_ids)
        if not ids:
            return {}
        # pyrefly: ignore [missing-attribute]
        result = await self.session.execute(select(BlogDB).where(BlogDB.id.in_(ids)))
        return {blog.id: blog for blog in result.scalars().all()}

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Replace every field present in ``blog_update``.

        Args:
            blog_id: Blog UUID
            blog_update: Fields to replace

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in blog_update.model_dump(exclude_unset=True).items():
            setattr(db_blog, key, value)

        return await self._add_and_refresh(db_blog)
