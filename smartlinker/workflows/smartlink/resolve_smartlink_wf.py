"""Workflow for filling a smartlink form from a single music URL.

Orchestrates: URL validation → Odesli resolution → additive platform merge
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartlinker.components.smartlink.platform_merge_comp import apply_resolved
from smartlinker.components.smartlink.url_validator_comp import require_supported_music_url
from smartlinker.helpers.dto.smartlink_dto import SmartlinkData, SmartlinkFormData
from smartlinker.helpers.logging_helper import log_context

if TYPE_CHECKING:
    from smartlinker.components.smartlink.odesli_client_comp import OdesliClient

logger = logging.getLogger(__name__)


async def resolve_into_form_workflow(
    client: OdesliClient,
    form: SmartlinkFormData,
    url: str,
) -> tuple[SmartlinkFormData, SmartlinkData]:
    """Resolve a music URL and merge the result into form state.

    Workflow:
    1. Validate the URL against known streaming domains
    2. Resolve it through Odesli
    3. Overwrite title/artist/cover and append platforms not already present

    Args:
        client: Resolver client
        form: Current form state (not modified)
        url: Music URL supplied by the user

    Returns:
        Tuple of (new form state, normalized resolution)

    Raises:
        InvalidUrlError: If the URL is not a supported music link
        ResolutionError: If resolution fails
    """
    url = require_supported_music_url(url)

    with log_context(url=url):
        resolved = await client.resolve(url)
        new_form = apply_resolved(form, resolved)

        added = len(new_form.platforms) - len(form.platforms)
        logger.info(f"Merged {added} new platform(s) ({len(resolved.platforms) - added} already present)")
    return new_form, resolved
