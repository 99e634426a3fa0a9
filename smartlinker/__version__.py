"""Version information for Smartlinker."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the persisted smartlink layout
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - SQLite record store with issued-id ledger
#         - Counters no longer refresh updated_at
#         - CLI collaborator (resolve/create/list/show/delete/view/click)
# 0.1.0 - Initial pre-alpha release
#         - Odesli resolution and normalization
#         - Platform catalog and additive platform merge
