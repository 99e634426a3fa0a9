"""Smartlink components for resolving and normalizing music links.

This module provides components for:
- Platform catalog (canonical ids, names, icons, Odesli keys)
- URL validation against known streaming domains
- Odesli resolution and response normalization
- Additive platform merge and form edits
"""

from smartlinker.components.smartlink.odesli_client_comp import OdesliClient, ResolverConfig
from smartlinker.components.smartlink.platform_catalog_comp import list_platforms, lookup
from smartlinker.components.smartlink.platform_merge_comp import apply_resolved, merge_resolved
from smartlinker.components.smartlink.response_normalizer_comp import normalize
from smartlinker.components.smartlink.url_validator_comp import (
    is_supported_music_url,
    require_supported_music_url,
)

__all__ = [
    "OdesliClient",
    "ResolverConfig",
    "apply_resolved",
    "is_supported_music_url",
    "list_platforms",
    "lookup",
    "merge_resolved",
    "normalize",
    "require_supported_music_url",
]
