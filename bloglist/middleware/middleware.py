"""
Middleware components for the bloglist application.

This module contains the request logging middleware, CORS configuration and
the lifespan event handler that creates and disposes the database handle.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import settings
from bloglist.db import Database
from bloglist.errors import host
from bloglist.monitoring import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    sanitize_headers,
)
from bloglist.utils import get_summary

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    configure_logging()
    logger.info(f"Starting {app.title}...")

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        if settings.LOG_TO_FILE:
            logger.info("Logging to file enabled.")

        await database.init()
        app.state.database = database

        logger.info("Services initialized successfully")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")
    except Exception:
        logger.exception("Failed to initialize services")
        await database.close()
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    await database.close()
    logger.info("Services cleaned up successfully")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Bind a request id, then log request summary and timing information."""

        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        clear_context()
        bind_request_id(request_id)

        start_time = perf_counter()
        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")
        logger.debug("Request headers", headers=sanitize_headers(dict(request.headers)))

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
