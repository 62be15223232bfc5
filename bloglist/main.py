"""Bloglist Backend - blog list service with ownership-checked mutations."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded

from bloglist.configs import settings
from bloglist.errors import (
    BaseAppError,
    DatabaseError,
    app_exception_handler,
    database_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import limiter, rate_limit_exceeded_handler
from bloglist.middleware import LoggingMiddleware, configure_cors, lifespan
from bloglist.routes import auth_router, blog_router, user_router
from bloglist.schemas import HealthCheckResponse

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog list API with users, token login and like statistics",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

configure_cors(app)
app.add_middleware(LoggingMiddleware)

routes = [blog_router, user_router, auth_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "version": "1.0.0",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service version, timestamp and database reachability.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"status": "ok", "version": "1.0.0", "timestamp": "...", "database": "ok"}
    """
    database = getattr(request.app.state, "database", None)
    database_ok = database is not None and await database.ping()
    return HealthCheckResponse(
        status="ok",
        version=app.version,
        timestamp=datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S"),
        database="ok" if database_ok else "unavailable",
    )
