from bloglist.errors.base import BaseAppError, create_exception_handler, host
from bloglist.errors.blog import (
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
    app_exception_handler,
)
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    database_exception_handler,
)
from bloglist.errors.validation import validation_exception_handler, validation_failed_from

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationFailedError",
    "app_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "host",
    "validation_exception_handler",
    "validation_failed_from",
]
