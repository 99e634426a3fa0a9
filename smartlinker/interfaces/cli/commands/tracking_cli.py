"""
Tracking commands: record page views and platform clicks, list the catalog.

View/click recording mirrors what a page renderer does: unknown ids are
reported but never treated as hard failures by the store.
"""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from smartlinker.components.smartlink.platform_catalog_comp import list_platforms
from smartlinker.interfaces.cli.ui import COLOR_INFO, console, print_success, print_warning
from smartlinker.services.cli_bootstrap_svc import get_smartlink_service


def cmd_view(args: argparse.Namespace) -> int:
    """Record one page view."""
    service = get_smartlink_service()
    try:
        recorded = service.record_view(args.id)
    finally:
        service.close()

    if not recorded:
        print_warning(f"Unknown smartlink {args.id}; view not recorded")
        return 1
    print_success(f"View recorded for {args.id}")
    return 0


def cmd_click(args: argparse.Namespace) -> int:
    """Record one click on a platform link."""
    service = get_smartlink_service()
    try:
        recorded = service.record_click(args.id, args.platform)
    finally:
        service.close()

    if not recorded:
        print_warning(f"Unknown smartlink {args.id}; click not recorded")
        return 1
    print_success(f"Click on {args.platform} recorded for {args.id}")
    return 0


def cmd_platforms(args: argparse.Namespace) -> int:
    """List the supported platform catalog."""
    table = Table(title="Supported platforms", box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("ID", style=COLOR_INFO)
    table.add_column("Name")
    table.add_column("Odesli key")
    table.add_column("Color")

    for platform in list_platforms():
        table.add_row(platform.id, platform.name, platform.provider_key, platform.color)

    console.print(table)
    return 0
