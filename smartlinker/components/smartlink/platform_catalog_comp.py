"""Static catalog of supported streaming platforms.

The catalog is the single source of truth for canonical platform ids. It maps
each id to its display name, icon reference, brand color and the key the
Odesli API uses for the same platform (e.g. appleMusic -> itunes).

Ids not present here are user-defined custom platforms.
"""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

from smartlinker.helpers.time_helper import now_ms

# Shown for platforms the catalog does not know (e.g. a provider key added upstream)
FALLBACK_ICON = "🎵"
FALLBACK_COLOR = "#6b7280"

# User-defined platforms
CUSTOM_PLATFORM_PREFIX = "custom-"
CUSTOM_PLATFORM_ICON = "🔗"


@dataclass(frozen=True)
class PlatformDescriptor:
    """Catalog entry for one streaming platform.

    Attributes:
        id: Canonical platform key used in smartlinks
        name: Display name
        provider_key: Key of this platform in Odesli's linksByPlatform
        icon: Icon reference for UI collaborators
        color: Brand color (hex)
    """

    id: str
    name: str
    provider_key: str
    icon: str
    color: str


_CATALOG: tuple[PlatformDescriptor, ...] = (
    PlatformDescriptor("spotify", "Spotify", "spotify", "spotify", "#1DB954"),
    PlatformDescriptor("appleMusic", "Apple Music", "itunes", "apple-music", "#FA243C"),
    PlatformDescriptor("youtube", "YouTube", "youtube", "youtube", "#FF0000"),
    PlatformDescriptor("youtubeMusic", "YouTube Music", "youtubeMusic", "youtube-music", "#FF0000"),
    PlatformDescriptor("deezer", "Deezer", "deezer", "deezer", "#A238FF"),
    PlatformDescriptor("amazonMusic", "Amazon Music", "amazon", "amazon-music", "#00A8E1"),
    PlatformDescriptor("tidal", "Tidal", "tidal", "tidal", "#000000"),
    PlatformDescriptor("soundcloud", "SoundCloud", "soundcloud", "soundcloud", "#FF5500"),
    PlatformDescriptor("pandora", "Pandora", "pandora", "pandora", "#224099"),
    PlatformDescriptor("napster", "Napster", "napster", "napster", "#2259FF"),
    PlatformDescriptor("audiomack", "Audiomack", "audiomack", "audiomack", "#FFA200"),
    PlatformDescriptor("anghami", "Anghami", "anghami", "anghami", "#A42BE0"),
    PlatformDescriptor("boomplay", "Boomplay", "boomplay", "boomplay", "#0A62F3"),
)

_BY_ID: dict[str, PlatformDescriptor] = {p.id: p for p in _CATALOG}


def list_platforms() -> tuple[PlatformDescriptor, ...]:
    """Return every catalog platform in presentation order."""
    return _CATALOG


def lookup(platform_id: str) -> PlatformDescriptor | None:
    """Return the descriptor for a canonical platform id, or None."""
    return _BY_ID.get(platform_id)


def platform_name(platform_id: str) -> str:
    """Display name for a platform id, falling back to the id itself."""
    descriptor = _BY_ID.get(platform_id)
    return descriptor.name if descriptor else platform_id


def is_custom_platform_id(platform_id: str) -> bool:
    """Check if an id belongs to a user-defined platform."""
    return platform_id.startswith(CUSTOM_PLATFORM_PREFIX)


def new_custom_platform_id() -> str:
    """Generate an id for a user-defined platform (custom-<ms>-<random>)."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{CUSTOM_PLATFORM_PREFIX}{now_ms()}-{suffix}"
