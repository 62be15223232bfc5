"""User routes for registration and listing."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserServiceDep
from bloglist.managers import limiter
from bloglist.schemas import UserResponse, UserWithBlogsResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserWithBlogsResponse],
    summary="List users",
    description="Return every user with the blogs they own.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "123e4567-e89b-12d3-a456-426614174111",
                            "username": "mluukkai",
                            "name": "Matti Luukkainen",
                            "blogs": [
                                {
                                    "id": "123e4567-e89b-12d3-a456-426614174000",
                                    "title": "Detecting a mistake",
                                    "author": "Jucca Palmu",
                                    "url": "www.nono.fi",
                                    "likes": 3,
                                },
                            ],
                        },
                    ],
                },
            },
        },
    },
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserWithBlogsResponse]:
    return await service.list_users()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register user",
    description="Create a user account with an argon2-hashed password.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174111",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {"kind": "ValidationFailed", "detail": "username must be unique"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit("10/minute")
async def create_user(
    request: Request,
    response: Response,
    payload: Annotated[
        dict[str, Any],
        Body(examples=[{"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}]),
    ],
    service: UserServiceDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter headers.
    payload : dict
        Username, optional name and password.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user data.

    Raises
    ------
    ValidationFailedError
        If username or password is missing or too short.
    DuplicateEntryError
        If the username is already taken.
    """
    return await service.register(payload)
