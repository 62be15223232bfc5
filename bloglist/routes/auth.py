"""Authentication route issuing access tokens."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.dependencies import AuthServiceDep
from bloglist.managers import limiter
from bloglist.schemas import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"kind": "Unauthorized", "detail": "invalid username or password"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Too Many Requests"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit("5/minute")
async def login_for_access_token(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter headers.
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Access token object.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    user = await auth_service.authenticate_user(credentials.username, credentials.password)
    return auth_service.create_token_for_user(user)
