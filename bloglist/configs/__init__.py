from bloglist.configs.settings import (
    MAX_LIKES,
    MIN_USERNAME_LENGTH,
    NO_BLOGS,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "MAX_LIKES",
    "MIN_USERNAME_LENGTH",
    "NO_BLOGS",
    "LimiterConfig",
    "Settings",
    "settings",
]
