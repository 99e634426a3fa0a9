"""
Logging helpers: identity/role tagging, context injection and safe error messages.

Log lines are tagged from the emitting module's name suffix, so a record from
``smartlinker.services.domain.smartlink_svc`` renders as
``[Smartlink] [Service]``. Context set with ``set_log_context`` is appended to
every record emitted from the same task or thread.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from collections.abc import Iterator
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(identity_tag)s %(role_tag)s %(context_str)s%(message)s"

# Module suffix -> role label
_ROLE_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("_svc", "Service"),
    ("_wf", "Workflow"),
    ("_comp", "Component"),
    ("_sql", "SQL"),
    ("_helper", "Helper"),
    ("_dto", "DTO"),
    ("_cli", "Interface"),
)

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "smartlinker_log_context", default=None
)


def set_log_context(**values: Any) -> None:
    """Merge key/value pairs into the log context of the current task/thread."""
    current = dict(_log_context.get() or {})
    current.update(values)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all log context for the current task/thread."""
    _log_context.set(None)


@contextlib.contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Add context for the duration of a block, restoring the previous context on exit."""
    current = dict(_log_context.get() or {})
    current.update(values)
    token = _log_context.set(current)
    try:
        yield
    finally:
        _log_context.reset(token)


class SmartlinkerLogFilter(logging.Filter):
    """Adds ``identity_tag``, ``role_tag`` and ``context_str`` to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        identity, role = self._derive_tags(record.name)
        record.identity_tag = identity
        record.role_tag = role

        context = _log_context.get()
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            record.context_str = f"[{pairs}] "
        else:
            record.context_str = ""
        return True

    @staticmethod
    def _derive_tags(name: str) -> tuple[str, str]:
        module = name.rsplit(".", 1)[-1]
        for suffix, role in _ROLE_SUFFIXES:
            if module.endswith(suffix):
                stem = module[: -len(suffix)]
                if not stem:
                    break
                identity = " ".join(part.capitalize() for part in stem.split("_") if part)
                return f"[{identity}]", f"[{role}]"
        return name, ""


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure root logging once for the whole process.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.addFilter(SmartlinkerLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    Logs the full exception for debugging and returns a generic message
    that is safe to show to users.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display
    """
    logger.exception(f"[security] Exception sanitized: {e}")
    return safe_message
