"""
Helpers package.
"""

from .exceptions import (
    InvalidUrlError,
    NotFoundError,
    ResolutionError,
    ResolutionFailure,
    SmartlinkError,
)
from .logging_helper import configure_logging, log_context, sanitize_exception_message
from .time_helper import now_iso, now_ms

__all__ = [
    "InvalidUrlError",
    "NotFoundError",
    "ResolutionError",
    "ResolutionFailure",
    "SmartlinkError",
    "configure_logging",
    "log_context",
    "now_iso",
    "now_ms",
    "sanitize_exception_message",
]
