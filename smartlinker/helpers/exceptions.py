"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from enum import Enum


class SmartlinkError(Exception):
    """Base class for all smartlinker errors."""


class InvalidUrlError(SmartlinkError, ValueError):
    """Raised when a URL is not a recognized music-service link."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Not a supported music link: {url!r}")
        self.url = url


class ResolutionFailure(str, Enum):
    """Why a resolution call failed."""

    NETWORK_FAILURE = "network_failure"
    SERVICE_ERROR = "service_error"
    NO_METADATA = "no_metadata"


class ResolutionError(SmartlinkError):
    """Raised when a music URL cannot be resolved into a link set.

    NETWORK_FAILURE and SERVICE_ERROR are transient (the caller may retry).
    NO_METADATA is permanent for the URL that produced it.
    """

    def __init__(
        self,
        kind: ResolutionFailure,
        message: str,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.kind is not ResolutionFailure.NO_METADATA

    @classmethod
    def network_failure(cls, message: str) -> ResolutionError:
        return cls(ResolutionFailure.NETWORK_FAILURE, message)

    @classmethod
    def service_error(cls, status_code: int | None, message: str) -> ResolutionError:
        return cls(ResolutionFailure.SERVICE_ERROR, message, status_code=status_code)

    @classmethod
    def no_metadata(cls, message: str = "No metadata found for this link") -> ResolutionError:
        return cls(ResolutionFailure.NO_METADATA, message)


class NotFoundError(SmartlinkError, LookupError):
    """Raised when a smartlink id does not exist in the store."""

    def __init__(self, smartlink_id: str) -> None:
        super().__init__(f"Smartlink not found: {smartlink_id}")
        self.smartlink_id = smartlink_id
