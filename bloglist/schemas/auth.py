from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str = Field(..., examples=["mluukkai"])
    password: str = Field(..., examples=["salainen"])


class Token(BaseModel):
    """Token schema for JWT access tokens."""

    access_token: str
    token_type: str = "bearer"
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Claims extracted from a decoded access token."""

    username: str
    user_id: UUID
    jti: str
    token_type: str


class Principal(BaseModel):
    """The authenticated identity making a request."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    username: str
