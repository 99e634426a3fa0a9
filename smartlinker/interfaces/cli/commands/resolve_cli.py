"""
Resolve command: turn one music URL into a cross-platform link set.

Nothing is persisted and the database is never opened; use `create --url`
to save the result.
"""

from __future__ import annotations

import argparse
import asyncio

from smartlinker.components.smartlink.url_validator_comp import is_supported_music_url
from smartlinker.helpers.exceptions import ResolutionError
from smartlinker.interfaces.cli.ui import TableDisplay, print_error, print_warning, show_spinner
from smartlinker.services.cli_bootstrap_svc import get_resolver_client


def cmd_resolve(args: argparse.Namespace) -> int:
    """Resolve a URL through Odesli and print the normalized result."""
    url = args.url.strip()
    if not is_supported_music_url(url):
        print_error(f"Not a supported music link: {url}")
        return 1

    client = get_resolver_client()
    try:
        data = show_spinner("Resolving link...", asyncio.run, client.resolve(url))
    except ResolutionError as e:
        print_error(str(e))
        if e.retryable:
            print_warning("This looks transient; try again in a moment.")
        return 1

    TableDisplay.show_resolved(data)
    return 0
