"""
Blog schemas for the bloglist application.

Request payloads are validated explicitly by the services through
``validate_blog_create`` / ``validate_blog_update`` so that a failure surfaces
as ``ValidationFailedError`` before anything reaches the database.
"""

from collections.abc import Mapping
from typing import Any, Literal
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from bloglist.configs import MAX_LIKES, NO_BLOGS
from bloglist.errors import ValidationFailedError, validation_failed_from


def _non_empty(value: object, field: str) -> object:
    if value is None or (isinstance(value, str) and not value.strip()):
        mssg = f"{field} is required"
        raise ValueError(mssg)
    return value.strip() if isinstance(value, str) else value


class BlogCreate(BaseModel):
    """Blog creation payload (the owner comes from the authenticated principal)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., max_length=300, examples=["Detecting a mistake"])
    author: str | None = Field(default=None, max_length=200, examples=["Jucca Palmu"])
    url: str = Field(..., max_length=2000, examples=["www.nono.fi"])
    likes: int = Field(default=0, ge=0, le=MAX_LIKES, description="Like count, 0 when omitted")

    @field_validator("title", "url", mode="before")
    @classmethod
    def require_text(cls, v: object, info: ValidationInfo) -> object:
        return _non_empty(v, info.field_name)

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v: object) -> object:
        """Treat an explicit null like an omitted value."""
        return 0 if v is None else v


class BlogUpdate(BaseModel):
    """Blog update payload. Every provided field replaces the stored value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, max_length=300)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=2000)
    likes: int | None = Field(default=None, ge=0, le=MAX_LIKES)

    @field_validator("title", "url", mode="before")
    @classmethod
    def require_text_if_provided(cls, v: object, info: ValidationInfo) -> object:
        return _non_empty(v, info.field_name)

    @field_validator("likes", mode="before")
    @classmethod
    def require_likes_if_provided(cls, v: object) -> object:
        if v is None:
            mssg = "likes cannot be null"
            raise ValueError(mssg)
        return v


class OwnerSummary(BaseModel):
    """Owner information embedded in blog listings (no credential material)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: UUID = Field(validation_alias=AliasChoices("user_id", "user"))


class BlogListResponse(BaseModel):
    """Blog list item with the owner's username and name."""

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: OwnerSummary


class BlogSummary(BaseModel):
    """Blog as embedded in a user listing."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int


class BlogStatisticsResponse(BaseModel):
    """Like statistics over every stored blog."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"maxLikes": 0, "mostLiked": NO_BLOGS}},
    )

    max_likes: int = Field(alias="maxLikes")
    most_liked: BlogResponse | Literal["no blogs"] = Field(alias="mostLiked")


def _validate[ModelT: BaseModel](
    model: type[ModelT],
    payload: Mapping[str, Any] | None,
    label: str,
) -> ModelT:
    if not isinstance(payload, Mapping):
        mssg = f"{label} validation failed: request body must be a JSON object"
        raise ValidationFailedError(detail=mssg)
    try:
        return model.model_validate(dict(payload))
    except ValidationError as e:
        raise validation_failed_from(e, label) from e


def validate_blog_create(payload: Mapping[str, Any] | None) -> BlogCreate:
    """
    Validate a blog creation payload.

    Raises:
        ValidationFailedError: If title or url is missing/empty or likes is negative.
    """
    return _validate(BlogCreate, payload, "Blog")


def validate_blog_update(payload: Mapping[str, Any] | None) -> BlogUpdate:
    """
    Validate a blog update payload.

    Raises:
        ValidationFailedError: If a provided field is invalid.
    """
    return _validate(BlogUpdate, payload, "Blog")
