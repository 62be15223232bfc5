from bloglist.schemas.auth import LoginRequest, Principal, Token, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogResponse,
    BlogStatisticsResponse,
    BlogSummary,
    BlogUpdate,
    OwnerSummary,
    validate_blog_create,
    validate_blog_update,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import (
    UserCreate,
    UserResponse,
    UserWithBlogsResponse,
    validate_user_create,
)

__all__ = [
    "BlogCreate",
    "BlogListResponse",
    "BlogResponse",
    "BlogStatisticsResponse",
    "BlogSummary",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "OwnerSummary",
    "Principal",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
    "UserWithBlogsResponse",
    "validate_blog_create",
    "validate_blog_update",
    "validate_user_create",
]
