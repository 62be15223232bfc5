"""Application dependencies: sessions, repositories, services and the principal."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import Database
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import Principal
from bloglist.services import AuthService, BlogService, UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_database(request: Request) -> Database:
    """Return the database handle created by the application lifespan."""
    return request.app.state.database


async def get_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """
    Yield one session per request, committed when the handler succeeds.

    Parameters
    ----------
    database : Database
        Database handle from application state.

    Yields
    ------
    AsyncSession
        Session bound to the request's transaction.
    """
    async with database.transaction() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


async def get_principal(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    auth_service: AuthServiceDep,
) -> Principal:
    """
    Resolve the authenticated principal from the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the Authorization header is absent.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Principal
        The identity making the request.

    Raises
    ------
    UnauthorizedError
        If the token is missing, invalid, expired, or its user is gone.
    """
    return await auth_service.resolve_principal(token)


PrincipalDep = Annotated[Principal, Depends(get_principal)]
