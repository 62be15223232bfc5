from bloglist.managers.password_manager import (
    PasswordHasher,
    PasswordHashingError,
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.rate_limiter import limiter, rate_limit_exceeded_handler
from bloglist.managers.token_manager import (
    create_access_token,
    decode_access_token,
)

__all__ = [
    "PasswordHasher",
    "PasswordHashingError",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "hash_password",
    "limiter",
    "rate_limit_exceeded_handler",
    "verify_password",
]
