"""Errors raised by the blog, user and auth services."""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class ValidationFailedError(BaseAppError):
    """Raised when a required field is missing or malformed."""

    kind = "ValidationFailed"

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)
        self.errors = errors or []


class UnauthorizedError(BaseAppError):
    """Raised when the credential is missing or fails verification."""

    kind = "Unauthorized"

    def __init__(self, detail: str = "token missing or invalid") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentialsError(UnauthorizedError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class ForbiddenError(BaseAppError):
    """Raised when an authenticated principal does not own the resource."""

    kind = "Forbidden"

    def __init__(self, detail: str = "You cannot modify a blog that is not yours") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class NotFoundError(BaseAppError):
    """Raised when the requested resource does not exist."""

    kind = "NotFound"

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


app_exception_handler = create_exception_handler(logger)
