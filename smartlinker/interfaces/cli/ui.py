#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from smartlinker.helpers.dto.smartlink_dto import Smartlink, SmartlinkData

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for smartlinks, resolved link sets and the platform catalog.
    """

    @staticmethod
    def show_smartlinks(smartlinks: list[Smartlink], title: str = "Smartlinks"):
        """Display a table of smartlinks with usage counters."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("ID", style=COLOR_INFO, overflow="fold")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Platforms", justify="right")
        table.add_column("Views", justify="right")
        table.add_column("Clicks", justify="right")
        table.add_column("Updated", width=24)

        for link in smartlinks:
            table.add_row(
                link.id,
                link.title,
                link.artist,
                str(len(link.platforms)),
                str(link.views),
                str(link.total_clicks),
                link.updated_at,
            )

        console.print(table)

    @staticmethod
    def show_platform_links(rows: Iterable[tuple[str, str, str]], title: str = "Platforms"):
        """Display (platform id, name/url, extra) rows."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Platform", style=COLOR_INFO)
        table.add_column("URL", overflow="fold")
        table.add_column("Clicks", justify="right")

        for platform, url, clicks in rows:
            table.add_row(platform, url, clicks)

        console.print(table)

    @staticmethod
    def show_resolved(data: SmartlinkData):
        """Display a normalized resolution."""
        content = f"[bold]Title:[/bold] {data.title}\n[bold]Artist:[/bold] {data.artist}\n[bold]Image:[/bold] {data.image_url or '-'}"
        InfoPanel.show("Resolved", content, COLOR_SUCCESS)

        table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Platform", style=COLOR_INFO)
        table.add_column("URL", overflow="fold")
        for platform_id, url in data.platforms.items():
            table.add_row(platform_id, url)
        console.print(table)

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a summary table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Field", style="bold")
        table.add_column("Value", overflow="fold")

        for key, value in data.items():
            table.add_row(key, "" if value is None else str(value))

        console.print(table)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
