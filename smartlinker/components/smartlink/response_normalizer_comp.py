"""Normalization of Odesli responses into SmartlinkData.

Odesli returns one entity per provider (Spotify track, iTunes song, ...) plus
a link per provider. Only the primary entity, named by ``entityUniqueId``,
supplies metadata; links are picked per catalog platform by provider key.

Pure and deterministic: no I/O, safe to test without network access.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from smartlinker.components.smartlink.platform_catalog_comp import list_platforms
from smartlinker.helpers.dto.smartlink_dto import SmartlinkData
from smartlinker.helpers.exceptions import ResolutionError

UNKNOWN_TITLE = "Unknown title"
UNKNOWN_ARTIST = "Unknown artist"


def _none_as_empty(value: Any) -> Any:
    return {} if value is None else value


# Odesli may send null instead of an empty object
OptionalMapping = Annotated[dict[str, Any], BeforeValidator(_none_as_empty)]


class OdesliEntity(BaseModel):
    """Metadata record for one provider's view of the song."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    type: str | None = None
    title: str | None = None
    artist_name: str | None = Field(default=None, alias="artistName")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")


class OdesliResponse(BaseModel):
    """Top-level Odesli links response.

    Entities and links stay loosely typed: only the primary entity and the
    catalog's provider keys are ever read, and a malformed entry elsewhere
    must not fail the whole response.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    entity_unique_id: str = Field(alias="entityUniqueId")
    entities_by_unique_id: OptionalMapping = Field(default_factory=dict, alias="entitiesByUniqueId")
    links_by_platform: OptionalMapping = Field(default_factory=dict, alias="linksByPlatform")

    def primary_entity(self) -> OdesliEntity | None:
        """Return the entity named by entityUniqueId, or None if it is missing."""
        raw = self.entities_by_unique_id.get(self.entity_unique_id)
        if raw is None:
            return None
        return OdesliEntity.model_validate(raw)

    def link_url(self, provider_key: str) -> str | None:
        """Return the non-empty URL for a provider key, or None."""
        link = self.links_by_platform.get(provider_key)
        if not isinstance(link, dict):
            return None
        url = link.get("url")
        if isinstance(url, str) and url:
            return url
        return None


def parse_response(raw: dict[str, Any]) -> OdesliResponse:
    """Validate a decoded Odesli document.

    Raises:
        ResolutionError: NO_METADATA if the document has no usable primary entity id
    """
    try:
        return OdesliResponse.model_validate(raw)
    except ValidationError as e:
        raise ResolutionError.no_metadata(f"Malformed resolution response: {e.error_count()} error(s)") from e


def normalize(raw: dict[str, Any] | OdesliResponse) -> SmartlinkData:
    """Transform a raw Odesli response into SmartlinkData.

    Args:
        raw: Decoded JSON document, or an already-parsed OdesliResponse

    Returns:
        SmartlinkData with title/artist (placeholders when absent), image URL
        (empty when absent) and catalog-keyed platform URLs

    Raises:
        ResolutionError: NO_METADATA if the primary entity is missing or malformed

    Examples:
        >>> normalize({
        ...     "entityUniqueId": "A",
        ...     "entitiesByUniqueId": {"A": {"title": "Song", "artistName": "Band"}},
        ...     "linksByPlatform": {"spotify": {"url": "https://open.spotify.com/x"}},
        ... }).platforms
        {'spotify': 'https://open.spotify.com/x'}
    """
    response = raw if isinstance(raw, OdesliResponse) else parse_response(raw)

    try:
        entity = response.primary_entity()
    except ValidationError as e:
        raise ResolutionError.no_metadata(
            f"Malformed metadata for entity {response.entity_unique_id}"
        ) from e

    if entity is None:
        raise ResolutionError.no_metadata()

    platforms: dict[str, str] = {}
    for descriptor in list_platforms():
        url = response.link_url(descriptor.provider_key)
        if url:
            platforms[descriptor.id] = url

    return SmartlinkData(
        title=entity.title or UNKNOWN_TITLE,
        artist=entity.artist_name or UNKNOWN_ARTIST,
        image_url=entity.thumbnail_url or "",
        platforms=platforms,
    )
