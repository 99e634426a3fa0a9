"""DTOs for smartlinks and resolved link sets.

These dataclasses represent a platform link, the editable form state, the
persisted smartlink aggregate, and the normalized output of a resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_BUTTON_COLOR = "#3b82f6"
DEFAULT_BUTTON_TEXT_COLOR = "#ffffff"


@dataclass(frozen=True)
class PlatformLink:
    """One streaming destination on a smartlink page.

    ``id`` is the canonical platform key (e.g. "spotify") or a
    ``custom-...`` id for user-defined platforms.
    """

    id: str
    name: str
    url: str
    icon: str
    color: str


@dataclass(frozen=True)
class SmartlinkAnalytics:
    """Optional tracking tags rendered into the public page."""

    gtm_id: str | None = None
    ga4_id: str | None = None


@dataclass(frozen=True)
class SmartlinkCustomization:
    """Page colors. Always present, every field has a default."""

    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    button_color: str = DEFAULT_BUTTON_COLOR
    button_text_color: str = DEFAULT_BUTTON_TEXT_COLOR


@dataclass(frozen=True)
class SmartlinkFormData:
    """Editable fields of a smartlink (everything but id, timestamps and counters)."""

    title: str = ""
    artist: str = ""
    description: str = ""
    release_date: str = ""
    cover_image: str = ""
    platforms: tuple[PlatformLink, ...] = ()
    analytics: SmartlinkAnalytics = field(default_factory=SmartlinkAnalytics)
    customization: SmartlinkCustomization = field(default_factory=SmartlinkCustomization)


@dataclass(frozen=True)
class Smartlink:
    """The persisted smartlink aggregate.

    ``views`` and ``clicks`` are usage counters; they only ever grow and
    updating them does not change ``updated_at``.
    """

    id: str
    title: str
    artist: str
    description: str
    release_date: str
    cover_image: str
    platforms: tuple[PlatformLink, ...]
    analytics: SmartlinkAnalytics
    customization: SmartlinkCustomization
    created_at: str
    updated_at: str
    views: int = 0
    # platform id -> click count; absent keys count as 0
    clicks: dict[str, int] = field(default_factory=dict, hash=False)

    @property
    def total_clicks(self) -> int:
        """Sum of clicks over every platform."""
        return sum(self.clicks.values())

    def clicks_for(self, platform_id: str) -> int:
        """Click count for one platform (0 when never clicked)."""
        return self.clicks.get(platform_id, 0)

    def to_form_data(self) -> SmartlinkFormData:
        """Editable view of this smartlink, e.g. to pre-fill an edit form."""
        return SmartlinkFormData(
            title=self.title,
            artist=self.artist,
            description=self.description,
            release_date=self.release_date,
            cover_image=self.cover_image,
            platforms=self.platforms,
            analytics=self.analytics,
            customization=self.customization,
        )


@dataclass(frozen=True)
class SmartlinkData:
    """Normalized result of resolving one music URL. Never persisted.

    ``platforms`` maps canonical platform key -> URL, in catalog order.
    Keys are only present when the service supplied a non-empty URL.
    """

    title: str
    artist: str
    image_url: str
    platforms: dict[str, str] = field(default_factory=dict, hash=False)
