"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- Import only stdlib and typing (no smartlinker.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no DB access, no business logic
- Pure data structures with optional simple properties
"""

from .smartlink_dto import (
    PlatformLink,
    Smartlink,
    SmartlinkAnalytics,
    SmartlinkCustomization,
    SmartlinkData,
    SmartlinkFormData,
)

__all__ = [
    "PlatformLink",
    "Smartlink",
    "SmartlinkAnalytics",
    "SmartlinkCustomization",
    "SmartlinkData",
    "SmartlinkFormData",
]
