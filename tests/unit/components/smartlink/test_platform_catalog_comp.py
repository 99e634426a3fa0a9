"""Unit tests for smartlinker.components.smartlink.platform_catalog_comp."""

import dataclasses

import pytest

from smartlinker.components.smartlink.platform_catalog_comp import (
    CUSTOM_PLATFORM_PREFIX,
    PlatformDescriptor,
    is_custom_platform_id,
    list_platforms,
    lookup,
    new_custom_platform_id,
    platform_name,
)


class TestListPlatforms:
    """Tests for list_platforms."""

    @pytest.mark.unit
    def test_catalog_order_is_stable(self) -> None:
        """Catalog order is the presentation order and must not change between calls."""
        ids = [p.id for p in list_platforms()]
        assert ids[:3] == ["spotify", "appleMusic", "youtube"]
        assert ids == [p.id for p in list_platforms()]

    @pytest.mark.unit
    def test_ids_are_unique(self) -> None:
        ids = [p.id for p in list_platforms()]
        assert len(ids) == len(set(ids)) == 13

    @pytest.mark.unit
    def test_apple_music_uses_itunes_provider_key(self) -> None:
        """Canonical id and Odesli key differ for Apple Music and Amazon Music."""
        assert lookup("appleMusic").provider_key == "itunes"
        assert lookup("amazonMusic").provider_key == "amazon"

    @pytest.mark.unit
    def test_descriptors_are_immutable(self) -> None:
        descriptor = list_platforms()[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.name = "Changed"  # type: ignore[misc]


class TestLookup:
    """Tests for lookup and platform_name."""

    @pytest.mark.unit
    def test_lookup_known_platform(self) -> None:
        descriptor = lookup("spotify")
        assert isinstance(descriptor, PlatformDescriptor)
        assert descriptor.name == "Spotify"

    @pytest.mark.unit
    def test_lookup_unknown_returns_none(self) -> None:
        assert lookup("bandcamp") is None
        assert lookup("itunes") is None  # provider keys are not canonical ids

    @pytest.mark.unit
    def test_platform_name_falls_back_to_id(self) -> None:
        assert platform_name("soundcloud") == "SoundCloud"
        assert platform_name("bandcamp") == "bandcamp"


class TestCustomPlatformIds:
    """Tests for custom platform id helpers."""

    @pytest.mark.unit
    def test_new_custom_id_has_prefix(self) -> None:
        platform_id = new_custom_platform_id()
        assert platform_id.startswith(CUSTOM_PLATFORM_PREFIX)
        assert is_custom_platform_id(platform_id)
        assert lookup(platform_id) is None

    @pytest.mark.unit
    def test_new_custom_ids_differ(self) -> None:
        assert len({new_custom_platform_id() for _ in range(50)}) == 50

    @pytest.mark.unit
    def test_catalog_ids_are_not_custom(self) -> None:
        assert not any(is_custom_platform_id(p.id) for p in list_platforms())
