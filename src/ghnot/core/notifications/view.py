"""
Rendering of notifications for the terminal.

Uses rich markup for colours; callers print the result with a rich Console.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from ghnot.core.notifications.models import Notification

PRETTY_TYPES = {
    "Issue": "[blue]IS[/blue]",
    "PullRequest": "[cyan]PR[/cyan]",
}

PRETTY_STATES = {
    "open": "[green]OP[/green]",
    "closed": "[red]CL[/red]",
    "merged": "[magenta]MG[/magenta]",
}


def pretty_type(notification: Notification) -> str:
    return PRETTY_TYPES.get(notification.subject.type, "[yellow]T?[/yellow]")


def pretty_state(notification: Notification) -> str:
    return PRETTY_STATES.get(notification.subject.state, "[yellow]S?[/yellow]")


def to_line(notification: Notification) -> str:
    """One-line summary, e.g. ``IS OP owner/repo by alice: 'Title'``."""
    return (
        f"{pretty_type(notification)} {pretty_state(notification)} "
        f"{escape(notification.repository.full_name)} "
        f"by {escape(notification.author.login)}: "
        f"'{escape(notification.subject.title)}'"
    )


def to_text(notifications: Sequence[Notification]) -> str:
    """One line per notification."""
    return "\n".join(to_line(n) for n in notifications)


def to_table(notifications: Sequence[Notification], show_ids: bool = True) -> Table:
    """
    Build a table of notifications.

    Args:
        notifications: Notifications to render, in display order
        show_ids: Include the thread id column (needed for hide/done)

    Returns:
        rich Table ready to print
    """
    table = Table(show_header=True, header_style="bold", box=None)
    if show_ids:
        table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("State", no_wrap=True)
    table.add_column("Repository", style="bold")
    table.add_column("Author")
    table.add_column("Title")

    for n in notifications:
        row = [
            pretty_type(n),
            pretty_state(n),
            escape(n.repository.full_name),
            escape(n.author.login),
            escape(n.subject.title),
        ]
        if show_ids:
            row.insert(0, n.id)
        table.add_row(*row)

    return table
