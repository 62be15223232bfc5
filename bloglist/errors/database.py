from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    kind = "DatabaseError"

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when a record cannot be written."""

    def __init__(self, detail: str = "Failed to connect to the database") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique value is already taken."""

    kind = "ValidationFailed"

    def __init__(self, detail: str = "A record with this value already exists") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


database_exception_handler = create_exception_handler(logger)
