from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR


def host(request: Request) -> str:
    """Return the client IP address."""
    return request.client.host if request.client else "unknown"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: str = "InternalError"

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.headers = headers

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Any,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")
        kind = getattr(exc, "kind", BaseAppError.kind)

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        content: dict[str, Any] = {"kind": kind, "detail": detail}
        if errors := getattr(exc, "errors", None):
            content["errors"] = errors

        return ORJSONResponse(
            content=content,
            status_code=status_code,
            headers=getattr(exc, "headers", None),
        )

    return handler
