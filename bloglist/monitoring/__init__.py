"""
Logging for the bloglist backend.

Usage
-----
>>> from bloglist.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from bloglist.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "sanitize_headers",
    "sanitize_log_message",
]
