"""Blog service enforcing ownership on every mutation."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from bloglist.errors import ForbiddenError, NotFoundError, UnauthorizedError
from bloglist.models import BlogDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import (
    BlogListResponse,
    BlogResponse,
    BlogStatisticsResponse,
    OwnerSummary,
    Principal,
    validate_blog_create,
    validate_blog_update,
)
from bloglist.utils.statistics import max_likes, most_liked

logger = get_logger(__name__)


def _is_owner(blog: BlogDB, principal: Principal) -> bool:
    return str(blog.user_id) == str(principal.user_id)


class BlogService:
    """
    Create, update, delete and list blogs on behalf of a principal.

    Every method runs inside the caller's session; the transaction that
    session belongs to makes the blog write and the owner's list update a
    single unit.
    """

    def __init__(self, blog_repo: BlogRepository, user_repo: UserRepository) -> None:
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def list_blogs(self) -> list[BlogListResponse]:
        """
        Return every blog with its owner's id, username and name.

        Returns:
            list[BlogListResponse]: Blogs in storage order
        """
        rows = await self.blog_repo.get_all_with_owners()
        return [
            BlogListResponse(
                id=blog.id,
                title=blog.title,
                author=blog.author,
                url=blog.url,
                likes=blog.likes,
                user=OwnerSummary.model_validate(owner),
            )
            for blog, owner in rows
        ]

    async def create_blog(
        self,
        principal: Principal | None,
        payload: Mapping[str, Any] | None,
    ) -> BlogResponse:
        """
        Create a blog owned by ``principal`` and record it on the owner.

        Args:
            principal: Authenticated identity, None when no valid credential
            payload: Raw request fields

        Returns:
            BlogResponse: The created blog

        Raises:
            UnauthorizedError: If there is no principal or its user no longer exists
            ValidationFailedError: If title or url is missing or empty
        """
        if principal is None:
            raise UnauthorizedError

        blog_create = validate_blog_create(payload)

        owner = await self.user_repo.get_by_id(principal.user_id)
        if owner is None:
            raise UnauthorizedError

        blog = await self.blog_repo.create(blog_create, owner.id)
        await self.user_repo.append_blog(owner, blog.id)

        logger.info(f"Blog {blog.id} created by {principal.username}")
        return BlogResponse.model_validate(blog)

    async def update_blog(
        self,
        principal: Principal | None,
        blog_id: UUID,
        payload: Mapping[str, Any] | None,
    ) -> BlogResponse:
        """
        Replace the provided fields of a blog the principal owns.

        Raises:
            UnauthorizedError: If there is no principal
            NotFoundError: If the blog does not exist
            ForbiddenError: If the principal does not own the blog
            ValidationFailedError: If a provided field is invalid
        """
        if principal is None:
            raise UnauthorizedError

        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError("blog not found")
        if not _is_owner(blog, principal):
            raise ForbiddenError

        blog_update = validate_blog_update(payload)
        updated = await self.blog_repo.update(blog_id, blog_update)
        if updated is None:
            raise NotFoundError("blog not found")

        logger.info(f"Blog {blog_id} updated by {principal.username}")
        return BlogResponse.model_validate(updated)

    async def delete_blog(self, principal: Principal | None, blog_id: UUID) -> None:
        """
        Delete a blog the principal owns and prune it from the owner's list.

        Raises:
            UnauthorizedError: If there is no principal
            NotFoundError: If the blog does not exist
            ForbiddenError: If the principal does not own the blog
        """
        if principal is None:
            raise UnauthorizedError

        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError("blog has already been deleted")
        if not _is_owner(blog, principal):
            raise ForbiddenError("You cannot delete a blog that is not yours")

        owner = await self.user_repo.get_by_id(blog.user_id)
        await self.blog_repo.delete(blog_id)
        if owner is not None:
            await self.user_repo.remove_blog(owner, blog_id)

        logger.info(f"Blog {blog_id} deleted by {principal.username}")

    async def statistics(self) -> BlogStatisticsResponse:
        """Return the maximum like count and the first blog reaching it."""
        blogs = await self.blog_repo.get_all()
        top = most_liked(blogs)
        return BlogStatisticsResponse(
            max_likes=max_likes(blogs),
            most_liked=top if isinstance(top, str) else BlogResponse.model_validate(top),
        )
