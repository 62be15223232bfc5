"""Custom validation error handling for FastAPI."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.errors.base import host
from bloglist.errors.blog import ValidationFailedError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def format_errors(errors: list[Any], *, skip_body: bool = False) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dictionaries into field/message/type entries.

    Args:
        errors: Output of ``ValidationError.errors()``.
        skip_body: Drop the leading location part (``body``, ``path``) added by FastAPI.

    Returns:
        List of formatted error entries.
    """
    formatted_errors = []
    for error in errors:
        loc = list(error.get("loc", []))
        if skip_body:
            loc = loc[1:]
        formatted_errors.append(
            {
                "field": ".".join(str(part) for part in loc),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            },
        )
    return formatted_errors


def validation_failed_from(exc: PydanticValidationError, label: str) -> ValidationFailedError:
    """
    Convert a pydantic ``ValidationError`` into a ``ValidationFailedError``.

    The detail reads like ``Blog validation failed: title: Field required``.
    """
    errors = format_errors(exc.errors())
    summary = ", ".join(
        f"{error['field']}: {error['message']}" if error["field"] else error["message"]
        for error in errors
    )
    return ValidationFailedError(detail=f"{label} validation failed: {summary}", errors=errors)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request parsing errors (malformed JSON, malformed ids) as ``ValidationFailed``.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(list(exec_error.errors()), skip_body=True)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "kind": ValidationFailedError.kind,
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
