"""
Smartlink commands: create, edit, list, show and delete smartlinks.

Architecture:
- Uses CLI bootstrap service to get a SmartlinkService instance
- Builds form state with the platform merge components
- Does NOT access Database directly
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace

from smartlinker.components.smartlink.platform_catalog_comp import platform_name
from smartlinker.components.smartlink.platform_merge_comp import (
    add_catalog_platform,
    add_custom_platform,
    remove_platform,
    update_platform_url,
)
from smartlinker.helpers.dto.smartlink_dto import (
    SmartlinkAnalytics,
    SmartlinkFormData,
)
from smartlinker.helpers.exceptions import InvalidUrlError, NotFoundError, ResolutionError
from smartlinker.interfaces.cli.ui import (
    TableDisplay,
    print_error,
    print_info,
    print_success,
    show_spinner,
)
from smartlinker.services.cli_bootstrap_svc import get_smartlink_service
from smartlinker.services.domain.smartlink_svc import SmartlinkService


def _split_pair(value: str, option: str) -> tuple[str, str]:
    key, sep, rest = value.partition("=")
    if not sep or not key.strip() or not rest.strip():
        raise ValueError(f"{option} expects KEY=URL, got '{value}'")
    return key.strip(), rest.strip()


def _apply_form_args(service: SmartlinkService, form: SmartlinkFormData, args: argparse.Namespace) -> SmartlinkFormData:
    """Apply command-line edits to form state.

    A --url resolution runs first, so explicit flags (--title, --link, ...)
    win over resolved metadata and URLs.
    """
    if getattr(args, "url", None):
        form, _ = show_spinner(
            "Resolving link...", asyncio.run, service.resolve_into_form(form, args.url)
        )

    edits = {
        "title": args.title,
        "artist": args.artist,
        "description": args.description,
        "release_date": args.release_date,
        "cover_image": args.cover_image,
    }
    form = replace(form, **{k: v for k, v in edits.items() if v is not None})

    platforms = form.platforms
    for platform_id in getattr(args, "remove", None) or []:
        platforms = remove_platform(platforms, platform_id)
    for pair in args.link or []:
        platform_id, url = _split_pair(pair, "--link")
        platforms = update_platform_url(add_catalog_platform(platforms, platform_id), platform_id, url)
    for pair in args.custom or []:
        name, url = _split_pair(pair, "--custom")
        platforms = add_custom_platform(platforms, name, url)

    analytics = form.analytics
    if args.gtm_id is not None or args.ga4_id is not None:
        analytics = SmartlinkAnalytics(
            gtm_id=args.gtm_id if args.gtm_id is not None else analytics.gtm_id,
            ga4_id=args.ga4_id if args.ga4_id is not None else analytics.ga4_id,
        )

    colors = {
        "background_color": args.background_color,
        "text_color": args.text_color,
        "button_color": args.button_color,
        "button_text_color": args.button_text_color,
    }
    customization = replace(form.customization, **{k: v for k, v in colors.items() if v is not None})

    return replace(form, platforms=platforms, analytics=analytics, customization=customization)


def cmd_create(args: argparse.Namespace) -> int:
    """Create a smartlink, optionally pre-filled from a music URL."""
    service = get_smartlink_service()
    try:
        form = _apply_form_args(service, SmartlinkFormData(), args)
        smartlink = service.create(form)
    except (InvalidUrlError, ResolutionError, ValueError) as e:
        print_error(str(e))
        return 1
    finally:
        service.close()

    print_success(f"Created smartlink {smartlink.id} with {len(smartlink.platforms)} platform(s)")
    return 0


def cmd_edit(args: argparse.Namespace) -> int:
    """Edit an existing smartlink. Counters and creation date are kept."""
    service = get_smartlink_service()
    try:
        current = service.get_smartlink(args.id)
        form = _apply_form_args(service, current.to_form_data(), args)
        smartlink = service.update(args.id, form)
    except (NotFoundError, InvalidUrlError, ResolutionError, ValueError) as e:
        print_error(str(e))
        return 1
    finally:
        service.close()

    print_success(f"Updated smartlink {smartlink.id}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List all smartlinks with usage counters."""
    service = get_smartlink_service()
    try:
        smartlinks = service.list_smartlinks()
    finally:
        service.close()

    if not smartlinks:
        print_info("No smartlinks yet. Create one with 'smartlinker create'.")
        return 0

    TableDisplay.show_smartlinks(smartlinks)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Show one smartlink with per-platform clicks."""
    service = get_smartlink_service()
    try:
        smartlink = service.get_smartlink(args.id)
    except NotFoundError as e:
        print_error(str(e))
        return 1
    finally:
        service.close()

    TableDisplay.show_summary(
        smartlink.title or smartlink.id,
        {
            "ID": smartlink.id,
            "Artist": smartlink.artist,
            "Description": smartlink.description,
            "Release date": smartlink.release_date,
            "Cover": smartlink.cover_image,
            "GTM": smartlink.analytics.gtm_id,
            "GA4": smartlink.analytics.ga4_id,
            "Background": smartlink.customization.background_color,
            "Text": smartlink.customization.text_color,
            "Button": smartlink.customization.button_color,
            "Button text": smartlink.customization.button_text_color,
            "Created": smartlink.created_at,
            "Updated": smartlink.updated_at,
            "Views": smartlink.views,
        },
    )

    rows = [(p.name, p.url, str(smartlink.clicks_for(p.id))) for p in smartlink.platforms]
    # Clicks on platforms that were since removed from the page
    listed = {p.id for p in smartlink.platforms}
    rows.extend(
        (f"{platform_name(pid)} (removed)", "", str(count))
        for pid, count in smartlink.clicks.items()
        if pid not in listed
    )
    TableDisplay.show_platform_links(rows)
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Delete a smartlink."""
    service = get_smartlink_service()
    try:
        deleted = service.delete(args.id)
    finally:
        service.close()

    if not deleted:
        print_error(f"Smartlink not found: {args.id}")
        return 1

    print_success(f"Deleted smartlink {args.id}")
    return 0
