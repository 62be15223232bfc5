"""User schemas for registration and listing."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from bloglist.configs import MIN_USERNAME_LENGTH, settings
from bloglist.errors import ValidationFailedError, validation_failed_from
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., max_length=50, examples=["mluukkai"])
    name: str | None = Field(default=None, max_length=200, examples=["Matti Luukkainen"])
    password: SecretStr = Field(..., description="Plain text password, hashed before storage")

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                mssg = "username is required"
                raise ValueError(mssg)
            if len(v) < MIN_USERNAME_LENGTH:
                mssg = f"username must be at least {MIN_USERNAME_LENGTH} characters long"
                raise ValueError(mssg)
        return v

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: object) -> object:
        raw = v.get_secret_value() if isinstance(v, SecretStr) else v
        if raw is None or (isinstance(raw, str) and len(raw) < settings.PASSWORD_MIN_LENGTH):
            mssg = f"password has to be at least {settings.PASSWORD_MIN_LENGTH} characters long"
            raise ValueError(mssg)
        return v


class UserResponse(BaseModel):
    """User response model (never carries the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UUID] = []


class UserWithBlogsResponse(BaseModel):
    """User listing entry with the owned blogs populated."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []


def validate_user_create(payload: Mapping[str, Any] | None) -> UserCreate:
    """
    Validate a user registration payload.

    Raises:
        ValidationFailedError: If the username or password is missing or too short.
    """
    if not isinstance(payload, Mapping):
        mssg = "User validation failed: request body must be a JSON object"
        raise ValidationFailedError(detail=mssg)
    try:
        return UserCreate.model_validate(dict(payload))
    except ValidationError as e:
        raise validation_failed_from(e, "User") from e
