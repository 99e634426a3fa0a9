"""Domain services."""

from .smartlink_svc import SmartlinkService

__all__ = ["SmartlinkService"]
