"""Platform list editing for smartlink forms.

All functions are pure: they take the current platform sequence and return a
new tuple, leaving the input untouched. Resolved platforms are merged
additively, so manual entries are never overwritten or reordered.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from smartlinker.components.smartlink.platform_catalog_comp import (
    CUSTOM_PLATFORM_ICON,
    FALLBACK_COLOR,
    FALLBACK_ICON,
    lookup,
    new_custom_platform_id,
)
from smartlinker.helpers.dto.smartlink_dto import PlatformLink, SmartlinkData, SmartlinkFormData


def build_platform_link(platform_id: str, url: str) -> PlatformLink:
    """Build a PlatformLink from the catalog, with fallbacks for unknown ids."""
    descriptor = lookup(platform_id)
    if descriptor is None:
        return PlatformLink(id=platform_id, name=platform_id, url=url, icon=FALLBACK_ICON, color=FALLBACK_COLOR)
    return PlatformLink(
        id=descriptor.id,
        name=descriptor.name,
        url=url,
        icon=descriptor.icon,
        color=descriptor.color,
    )


def merge_resolved(existing: Sequence[PlatformLink], resolved: SmartlinkData) -> tuple[PlatformLink, ...]:
    """Append resolved platforms that are not already present.

    Existing entries keep their position and URL. Idempotent: merging the
    same resolution twice yields the same list as merging once.

    Args:
        existing: Current platform list (not modified)
        resolved: Normalized resolution result

    Returns:
        existing + newly resolved platforms, in resolution order
    """
    seen = {p.id for p in existing}
    merged = list(existing)

    for platform_id, url in resolved.platforms.items():
        if not url or platform_id in seen:
            continue
        merged.append(build_platform_link(platform_id, url))
        seen.add(platform_id)

    return tuple(merged)


def apply_resolved(form: SmartlinkFormData, resolved: SmartlinkData) -> SmartlinkFormData:
    """Apply a resolution to form state.

    Title, artist and cover image are overwritten unconditionally; platforms
    are merged with ``merge_resolved``.
    """
    return replace(
        form,
        title=resolved.title,
        artist=resolved.artist,
        cover_image=resolved.image_url,
        platforms=merge_resolved(form.platforms, resolved),
    )


def add_catalog_platform(existing: Sequence[PlatformLink], platform_id: str) -> tuple[PlatformLink, ...]:
    """Append a catalog platform with an empty URL, unless already present.

    Raises:
        ValueError: If platform_id is not in the catalog
    """
    if lookup(platform_id) is None:
        raise ValueError(f"Unknown platform: {platform_id}")
    if any(p.id == platform_id for p in existing):
        return tuple(existing)
    return (*existing, build_platform_link(platform_id, ""))


def add_custom_platform(existing: Sequence[PlatformLink], name: str, url: str) -> tuple[PlatformLink, ...]:
    """Append a user-defined platform.

    Raises:
        ValueError: If name or url is empty
    """
    name = name.strip()
    url = url.strip()
    if not name or not url:
        raise ValueError("Custom platforms need both a name and a URL")

    platform = PlatformLink(
        id=new_custom_platform_id(),
        name=name,
        url=url,
        icon=CUSTOM_PLATFORM_ICON,
        color=FALLBACK_COLOR,
    )
    return (*existing, platform)


def remove_platform(existing: Sequence[PlatformLink], platform_id: str) -> tuple[PlatformLink, ...]:
    """Drop the platform with the given id (no-op if absent)."""
    return tuple(p for p in existing if p.id != platform_id)


def update_platform_url(existing: Sequence[PlatformLink], platform_id: str, url: str) -> tuple[PlatformLink, ...]:
    """Replace the URL of one platform, keeping its position."""
    return tuple(replace(p, url=url) if p.id == platform_id else p for p in existing)
