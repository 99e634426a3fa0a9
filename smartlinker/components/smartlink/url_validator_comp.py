"""Validation of user-supplied music URLs.

A URL is supported when it parses as http(s) with a host, and the host
contains one of the known streaming domains.
"""

from urllib.parse import urlparse

from smartlinker.helpers.exceptions import InvalidUrlError

MUSIC_DOMAINS: tuple[str, ...] = (
    "spotify.com",
    "music.apple.com",
    "youtube.com",
    "youtu.be",
    "music.youtube.com",
    "deezer.com",
    "music.amazon.",
    "tidal.com",
    "soundcloud.com",
    "pandora.com",
    "napster.com",
    "audiomack.com",
    "anghami.com",
    "boomplay.com",
)


def is_supported_music_url(url: str) -> bool:
    """Check if a URL points at a known music-streaming domain.

    Examples:
        >>> is_supported_music_url("https://open.spotify.com/track/123")
        True
        >>> is_supported_music_url("not a url")
        False
    """
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
    except ValueError:
        return False

    if parsed.scheme not in ("http", "https") or not host:
        return False

    return any(domain in host for domain in MUSIC_DOMAINS)


def require_supported_music_url(url: str) -> str:
    """Return the stripped URL, or raise if it is not a supported music link.

    Raises:
        InvalidUrlError: If the URL is not recognized
    """
    if not is_supported_music_url(url):
        raise InvalidUrlError(url)
    return url.strip()
