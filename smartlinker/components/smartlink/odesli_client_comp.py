"""Odesli (song.link) resolver client.

Resolves any supported music URL into a cross-platform link set via:
GET https://api.song.link/v1-alpha.1/links?url={url}

No authentication required. When a CORS-style proxy is configured (the
allorigins ``/get`` shape), the API URL is wrapped and the Odesli document is
read from the proxy's ``contents`` string.
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
from dataclasses import dataclass
from typing import Any

import requests

from smartlinker.components.smartlink.response_normalizer_comp import normalize
from smartlinker.helpers.dto.smartlink_dto import SmartlinkData
from smartlinker.helpers.exceptions import ResolutionError

logger = logging.getLogger(__name__)

ODESLI_API_URL = "https://api.song.link/v1-alpha.1/links"


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for OdesliClient.

    Attributes:
        base_url: Odesli links endpoint
        proxy_url: Optional allorigins-style proxy endpoint; None to call Odesli directly
        user_country: Optional ISO country code forwarded as ``userCountry``
        timeout_s: Optional HTTP timeout in seconds; None waits indefinitely
    """

    base_url: str = ODESLI_API_URL
    proxy_url: str | None = None
    user_country: str | None = None
    timeout_s: float | None = None


class OdesliClient:
    """Client for the Odesli links API.

    Each ``resolve`` call issues exactly one outbound request. Calls are not
    deduplicated or retried; retry policy belongs to the caller.

    Example:
        >>> client = OdesliClient(ResolverConfig())
        >>> data = asyncio.run(client.resolve("https://open.spotify.com/track/..."))
        >>> data.platforms["appleMusic"]
        'https://music.apple.com/...'
    """

    def __init__(self, cfg: ResolverConfig | None = None, session: requests.Session | None = None) -> None:
        self._cfg = cfg or ResolverConfig()
        self._http = session or requests

    async def resolve(self, url: str) -> SmartlinkData:
        """Resolve a music URL into normalized SmartlinkData.

        The blocking HTTP call runs in the loop's default executor.

        Args:
            url: Any music-streaming URL (validity is the caller's concern)

        Returns:
            Fully-formed SmartlinkData

        Raises:
            ResolutionError: NETWORK_FAILURE, SERVICE_ERROR or NO_METADATA
        """
        loop = asyncio.get_running_loop()
        raw = await loop.run_in_executor(None, functools.partial(self.fetch_raw, url))
        data = normalize(raw)
        logger.info(f"Resolved '{data.title}' by {data.artist}: {len(data.platforms)} platform(s)")
        return data

    def fetch_raw(self, url: str) -> dict[str, Any]:
        """Fetch the raw Odesli document for a URL (blocking).

        Raises:
            ResolutionError: NETWORK_FAILURE or SERVICE_ERROR
        """
        request_url, params = self._build_request(url)
        logger.debug(f"Requesting {request_url} for {url}")

        try:
            response = self._http.get(request_url, params=params, timeout=self._cfg.timeout_s)
        except requests.RequestException as e:
            raise ResolutionError.network_failure(f"Resolution request failed: {e}") from e

        if not response.ok:
            raise ResolutionError.service_error(
                response.status_code,
                f"Resolution service returned status {response.status_code}",
            )

        try:
            document = response.json()
        except ValueError as e:
            raise ResolutionError.service_error(
                response.status_code, "Resolution service returned invalid JSON"
            ) from e

        if self._cfg.proxy_url:
            document = self._unwrap_proxy(document)

        if not isinstance(document, dict):
            raise ResolutionError.service_error(
                response.status_code, "Resolution service returned an unexpected document"
            )
        return document

    def _build_request(self, url: str) -> tuple[str, dict[str, str]]:
        """Return (endpoint, query params), wrapping in the proxy if configured."""
        params = {"url": url}
        if self._cfg.user_country:
            params["userCountry"] = self._cfg.user_country

        if not self._cfg.proxy_url:
            return self._cfg.base_url, params

        target = requests.Request("GET", self._cfg.base_url, params=params).prepare().url
        return self._cfg.proxy_url, {"url": str(target)}

    def _unwrap_proxy(self, envelope: Any) -> Any:
        """Extract the upstream document from an allorigins-style envelope.

        Raises:
            ResolutionError: SERVICE_ERROR if upstream failed or contents is not JSON
        """
        if not isinstance(envelope, dict):
            raise ResolutionError.service_error(None, "Proxy returned an unexpected document")

        status = envelope.get("status")
        upstream_code = status.get("http_code") if isinstance(status, dict) else None
        if isinstance(upstream_code, int) and not 200 <= upstream_code < 300:
            raise ResolutionError.service_error(
                upstream_code, f"Resolution service returned status {upstream_code}"
            )

        contents = envelope.get("contents")
        if not isinstance(contents, str):
            raise ResolutionError.service_error(upstream_code, "Proxy response has no contents")

        try:
            return json.loads(contents)
        except ValueError as e:
            raise ResolutionError.service_error(
                upstream_code, "Resolution service returned invalid JSON"
            ) from e
