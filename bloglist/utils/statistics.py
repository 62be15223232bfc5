"""Like statistics over a collection of blogs."""

from collections.abc import Iterable, Sequence
from typing import Literal, Protocol

from bloglist.configs import NO_BLOGS


class HasLikes(Protocol):
    likes: int


def max_likes(blogs: Iterable[HasLikes]) -> int:
    """
    Return the greatest like count, or 0 for an empty collection.

    Args:
        blogs: Blogs to inspect

    Returns:
        int: Maximum ``likes`` value, never negative
    """
    return max([0, *(blog.likes for blog in blogs)])


def most_liked[BlogT: HasLikes](blogs: Sequence[BlogT]) -> BlogT | Literal["no blogs"]:
    """
    Return the first blog whose likes equal the maximum.

    Ties resolve to the earliest blog in the given order. An empty sequence
    yields the ``"no blogs"`` sentinel.
    """
    if not blogs:
        return NO_BLOGS
    top = max_likes(blogs)
    return next(blog for blog in blogs if blog.likes == top)
