"""
gh-not CLI - Lifecycle commands: hide, unhide, done.

Each command works on the local snapshot, refreshing it first when the cache
has expired, and writes it back only when a notification changed state.
"""

import logging
from collections.abc import Callable

import typer
from rich.console import Console

from ghnot.cli.common import build_manager, get_config
from ghnot.cli.errors import ExitCode, print_failure, print_unknown_ids_error
from ghnot.core.github import GitHubClientError
from ghnot.core.manager import NotificationManager
from ghnot.core.notifications import Notification, id_list

logger = logging.getLogger(__name__)

console = Console()


def _apply(
    ctx: typer.Context,
    ids: list[str],
    action: Callable[[NotificationManager, list[str]], list[Notification]],
    verb: str,
) -> None:
    manager = build_manager(get_config(ctx))

    try:
        manager.load()
    except (GitHubClientError, OSError, ValueError) as e:
        print_failure(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        updated = action(manager, ids)
    except GitHubClientError as e:
        _save_partial(manager)
        print_failure(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if manager.dirty:
        try:
            manager.save()
        except (OSError, ValueError) as e:
            print_failure(e)
            raise typer.Exit(ExitCode.GENERAL_ERROR)

    found = id_list(updated)
    missing = [i for i in ids if i not in found]

    for notification_id in found:
        console.print(f"[green]✓[/green] {verb}: {notification_id}")

    if missing:
        print_unknown_ids_error(missing)
        raise typer.Exit(ExitCode.USER_ERROR)


def _save_partial(manager: NotificationManager) -> None:
    """Persist changes made before a failed action, without hiding the failure."""
    if not manager.dirty:
        return
    try:
        manager.save()
    except (OSError, ValueError) as e:
        logger.warning("could not save notifications: %s", e)


def hide(
    ctx: typer.Context,
    ids: list[str] = typer.Argument(..., help="Notification ids"),
) -> None:
    """
    Hide notifications.

    Hidden notifications stay in the cache and are no longer updated from
    GitHub until unhidden.

    Examples:
        gh-not hide 123456789
    """
    _apply(ctx, ids, NotificationManager.hide, "Hidden")


def unhide(
    ctx: typer.Context,
    ids: list[str] = typer.Argument(..., help="Notification ids"),
) -> None:
    """
    Show hidden or done notifications again.

    Examples:
        gh-not unhide 123456789
    """
    _apply(ctx, ids, NotificationManager.unhide, "Visible")


def done(
    ctx: typer.Context,
    ids: list[str] = typer.Argument(..., help="Notification ids"),
) -> None:
    """
    Mark notifications as done on GitHub.

    They disappear from the cache on the first sync where GitHub no longer
    reports them.

    Examples:
        gh-not done 123456789 987654321
    """
    _apply(ctx, ids, NotificationManager.done, "Done")
