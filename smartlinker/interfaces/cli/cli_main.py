#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from smartlinker.helpers.logging_helper import configure_logging, sanitize_exception_message
from smartlinker.interfaces.cli.commands.resolve_cli import cmd_resolve
from smartlinker.interfaces.cli.commands.smartlink_cli import (
    cmd_create,
    cmd_delete,
    cmd_edit,
    cmd_list,
    cmd_show,
)
from smartlinker.interfaces.cli.commands.tracking_cli import cmd_click, cmd_platforms, cmd_view
from smartlinker.interfaces.cli.ui import print_error
from smartlinker.services.cli_bootstrap_svc import get_config_service


def _add_form_arguments(s: argparse.ArgumentParser) -> None:
    """Options shared by create and edit."""
    s.add_argument("--url", help="music URL to resolve and merge into the smartlink")
    s.add_argument("--title")
    s.add_argument("--artist")
    s.add_argument("--description")
    s.add_argument("--release-date", dest="release_date")
    s.add_argument("--cover-image", dest="cover_image")
    s.add_argument(
        "--link",
        action="append",
        metavar="PLATFORM=URL",
        help="set a catalog platform link (repeatable), e.g. spotify=https://open.spotify.com/...",
    )
    s.add_argument("--custom", action="append", metavar="NAME=URL", help="add a custom platform (repeatable)")
    s.add_argument("--gtm-id", dest="gtm_id", help="Google Tag Manager container id")
    s.add_argument("--ga4-id", dest="ga4_id", help="GA4 measurement id")
    s.add_argument("--background-color", dest="background_color")
    s.add_argument("--text-color", dest="text_color")
    s.add_argument("--button-color", dest="button_color")
    s.add_argument("--button-text-color", dest="button_text_color")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="smartlinker",
        description="Smartlinker - one music link for every streaming platform",
        epilog="Examples:\n"
        "  smartlinker resolve https://open.spotify.com/track/...   # Preview resolved links\n"
        "  smartlinker create --url https://open.spotify.com/track/...\n"
        "  smartlinker list                                         # Smartlinks with views/clicks\n"
        "  smartlinker click <id> spotify                           # Record a platform click",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'smartlinker <command> --help' for command-specific help)",
    )

    s = sub.add_parser("resolve", help="Resolve a music URL into platform links (nothing saved)")
    s.add_argument("url")
    s.set_defaults(func=cmd_resolve)

    s = sub.add_parser("create", help="Create a smartlink")
    _add_form_arguments(s)
    s.set_defaults(func=cmd_create)

    s = sub.add_parser("edit", help="Edit a smartlink (views and clicks are kept)")
    s.add_argument("id")
    _add_form_arguments(s)
    s.add_argument("--remove", action="append", metavar="PLATFORM_ID", help="remove a platform (repeatable)")
    s.set_defaults(func=cmd_edit)

    s = sub.add_parser("list", help="List smartlinks")
    s.set_defaults(func=cmd_list)

    s = sub.add_parser("show", help="Show a smartlink with per-platform clicks")
    s.add_argument("id")
    s.set_defaults(func=cmd_show)

    s = sub.add_parser("delete", help="Delete a smartlink")
    s.add_argument("id")
    s.set_defaults(func=cmd_delete)

    s = sub.add_parser("view", help="Record a page view")
    s.add_argument("id")
    s.set_defaults(func=cmd_view)

    s = sub.add_parser("click", help="Record a click on a platform link")
    s.add_argument("id")
    s.add_argument("platform", help="platform id, e.g. spotify or custom-...")
    s.set_defaults(func=cmd_click)

    s = sub.add_parser("platforms", help="List supported platforms")
    s.set_defaults(func=cmd_platforms)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    level = "DEBUG" if args.verbose else get_config_service().get("log_level", "INFO")
    configure_logging(level)

    try:
        result: int = args.func(args)
    except RuntimeError as e:
        # Database could not be opened (bad db_path, permissions)
        print_error(sanitize_exception_message(e, "Could not open the smartlink database; check db_path"))
        return 1
    return result


if __name__ == "__main__":
    raise SystemExit(main())
