"""Unit tests for smartlinker.components.smartlink.url_validator_comp."""

import pytest

from smartlinker.components.smartlink.url_validator_comp import (
    is_supported_music_url,
    require_supported_music_url,
)
from smartlinker.helpers.exceptions import InvalidUrlError


class TestIsSupportedMusicUrl:
    """Tests for is_supported_music_url."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        [
            "https://open.spotify.com/track/123",
            "https://music.apple.com/us/album/x/1?i=2",
            "https://www.youtube.com/watch?v=abc",
            "https://youtu.be/abc",
            "https://music.youtube.com/watch?v=abc",
            "https://www.deezer.com/track/1",
            "https://music.amazon.co.uk/albums/B0",
            "https://tidal.com/browse/track/1",
            "https://soundcloud.com/artist/track",
            "http://www.pandora.com/artist/x",
            "https://OPEN.SPOTIFY.COM/track/123",
        ],
    )
    def test_known_domains_are_supported(self, url: str) -> None:
        assert is_supported_music_url(url) is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "",
            "open.spotify.com/track/123",  # no scheme
            "ftp://open.spotify.com/track/123",
            "https://example.com/spotify.com",  # domain only in the path
            "https://bandcamp.com/track/x",
            "https://",
        ],
    )
    def test_other_urls_are_rejected(self, url: str) -> None:
        assert is_supported_music_url(url) is False

    @pytest.mark.unit
    def test_unparseable_url_is_rejected(self) -> None:
        assert is_supported_music_url("https://[open.spotify.com/track") is False


class TestRequireSupportedMusicUrl:
    """Tests for require_supported_music_url."""

    @pytest.mark.unit
    def test_returns_stripped_url(self) -> None:
        assert require_supported_music_url("  https://youtu.be/x \n") == "https://youtu.be/x"

    @pytest.mark.unit
    def test_raises_invalid_url_error(self) -> None:
        with pytest.raises(InvalidUrlError) as exc_info:
            require_supported_music_url("not a url")
        assert exc_info.value.url == "not a url"
        assert isinstance(exc_info.value, ValueError)
