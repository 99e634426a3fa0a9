"""Time utility helpers."""

import time
from datetime import datetime, timezone


def now_ms() -> int:
    """
    Get current timestamp in milliseconds since epoch.

    Returns:
        Current time as integer milliseconds
    """
    return int(time.time() * 1000)


def now_iso() -> str:
    """
    Get current UTC time as an ISO-8601 string with millisecond precision.

    Returns:
        Timestamp like "2024-05-01T12:30:45.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
