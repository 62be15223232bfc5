"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification run on a small thread pool so that argon2's
deliberate cost never blocks the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import settings
from bloglist.errors import BaseAppError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHashingError(BaseAppError):
    """Raised when the hashing backend fails."""

    kind = "PasswordHashingError"


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    Wraps passlib's CryptContext configured with the argon2 scheme only.
    """

    def __init__(
        self,
        memory_cost: int = settings.ARGON2_MEMORY_COST,
        time_cost: int = settings.ARGON2_TIME_COST,
        parallelism: int = settings.ARGON2_PARALLELISM,
    ) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=memory_cost,
            argon2__time_cost=time_cost,
            argon2__parallelism=parallelism,
        )
        logger.debug(f"PasswordHasher initialized with Argon2id (m={memory_cost}, t={time_cost})")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("salainen")  # $argon2id$v=19$m=19456,t=2,p=1$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg) from None

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing or corrupted hash never matches; a dummy verification keeps
        the timing of that path close to a real one.
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Get or create the default password hasher instance."""
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher without blocking the event loop.

    Example:
        >>> hashed = await hash_password("salainen")
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password with the default hasher without blocking the event loop.

    Example:
        >>> is_valid = await verify_password("salainen", hashed)
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
