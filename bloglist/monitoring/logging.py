"""
Structured logging with credential sanitization.

This module provides structured logging using structlog with:
- Pretty console output for development
- JSON output for every other environment
- Redaction of bearer tokens and password fields
- Request ID correlation through context variables

Examples
--------
>>> from bloglist.monitoring import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Blog created", blog_id="123")
"""

from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from re import Pattern
from re import compile as re_compile
from typing import Any

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from bloglist.configs import settings

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {"authorization", "cookie", "x-api-key", "password", "password_hash", "token", "access_token"},
)

# JWT tokens (base64url header.payload.signature)
JWT_PATTERN: Pattern = re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*")

# Characters to sanitize to prevent log injection
CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Escape control characters and redact JWTs in a log message.

    Examples
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return JWT_PATTERN.sub("[REDACTED_JWT]", message.translate(CONTROL_CHARS))


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Redact sensitive keys and sanitize every string value of the event."""
    for key, value in event_dict.items():
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = "[REDACTED]"
        elif isinstance(value, str):
            event_dict[key] = sanitize_log_message(value)
    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    """Return the final renderer for the current environment."""
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
    return JSONRenderer()


def _foreign_pre_chain() -> list[Processor]:
    return [
        add_log_level,
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        ExtraAdder(),
        sanitize_event_dict,
    ]


def configure_logging() -> None:
    """Configure structured logging for the application."""
    # Clear any existing root handlers to prevent duplicates on reload
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            sanitize_event_dict,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(
        ProcessorFormatter(
            processor=get_renderer(colors=True),
            foreign_pre_chain=_foreign_pre_chain(),
        ),
    )
    root.addHandler(console_handler)
    configure_file_logging()


def configure_file_logging() -> None:
    """Attach a rotating file handler (no colors) when file logging is enabled."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    file_handler.setLevel(INFO)
    file_handler.setFormatter(
        ProcessorFormatter(
            processor=get_renderer(colors=False),
            foreign_pre_chain=_foreign_pre_chain(),
        ),
    )
    root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog BoundLogger instance.
    """
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind request ID to the current logging context."""
    bind_contextvars(request_id=request_id)


def clear_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    Return headers with sensitive values redacted.

    Examples
    --------
    >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "json"})
    {'Authorization': '[REDACTED]', 'Accept': 'json'}
    """
    return {k: "[REDACTED]" if k.lower() in SENSITIVE_KEYS else v for k, v in headers.items()}
