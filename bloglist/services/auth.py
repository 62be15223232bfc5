"""Authentication service: credential checks, token issue and principal resolution."""

from datetime import timedelta

from bloglist.configs import settings
from bloglist.errors import InvalidCredentialsError, UnauthorizedError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token, decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import UserRepository
from bloglist.schemas import Principal, Token


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        if not user or not password:
            # Keeps unknown-user timing close to a wrong-password check
            await verify_password(password or "", None)
            raise InvalidCredentialsError

        if not await verify_password(password, user.password_hash):
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token object with the access token and the user's identity
        """
        access_token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return Token(
            access_token=access_token,
            token_type="bearer",
            username=user.username,
            name=user.name,
        )

    async def resolve_principal(self, token: str | None) -> Principal:
        """
        Resolve the principal a bearer token stands for.

        Raises:
            UnauthorizedError: If the token is missing, invalid, expired, or its
                user no longer exists
        """
        if not token:
            raise UnauthorizedError

        token_data = decode_access_token(token)
        if token_data is None:
            raise UnauthorizedError

        user = await self.user_repo.get_by_id(token_data.user_id)
        if user is None:
            raise UnauthorizedError

        return Principal(user_id=user.id, username=user.username)
