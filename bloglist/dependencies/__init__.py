from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    PrincipalDep,
    SessionDep,
    UserRepoDep,
    UserServiceDep,
    get_database,
    get_principal,
    get_session,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "PrincipalDep",
    "SessionDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_database",
    "get_principal",
    "get_session",
    "oauth2_scheme",
]
