"""
gh-not CLI - List notifications.

Shows the local snapshot, refreshing it from GitHub first when the cache
has expired.
"""

import json

import typer
from rich.console import Console

from ghnot.cli.common import build_manager, get_config
from ghnot.cli.errors import ExitCode, print_failure
from ghnot.core.github import GitHubClientError
from ghnot.core.notifications import NotificationFilter, visible
from ghnot.core.notifications.view import to_table, to_text

console = Console()


def list_notifications(
    ctx: typer.Context,
    refresh: bool = typer.Option(
        False,
        "--refresh",
        "-r",
        help="Fetch from GitHub even if the cache is fresh",
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Never fetch, use the cache as is",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include hidden and done notifications",
    ),
    repository: str | None = typer.Option(
        None,
        "--repo",
        help="Filter by repository (owner/name or part of it)",
    ),
    subject_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Filter by subject type (Issue, PullRequest, ...)",
    ),
    state: str | None = typer.Option(
        None,
        "--state",
        "-s",
        help="Filter by subject state (open, closed, merged)",
    ),
    author: str | None = typer.Option(
        None,
        "--author",
        help="Filter by author login",
    ),
    reason: str | None = typer.Option(
        None,
        "--reason",
        help="Filter by notification reason (mention, review_requested, ...)",
    ),
    unread: bool = typer.Option(
        False,
        "--unread",
        "-u",
        help="Only unread notifications",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="One line per notification instead of a table",
    ),
) -> None:
    """
    List notifications.

    Examples:
        gh-not list                         # Visible notifications
        gh-not list --refresh               # Fetch first
        gh-not list --type PullRequest -s open
        gh-not list --repo nobe4/ --unread
        gh-not list --all --json
    """
    if refresh and offline:
        console.print("[red]Error:[/red] --refresh and --offline are mutually exclusive")
        raise typer.Exit(ExitCode.USER_ERROR)

    manager = build_manager(get_config(ctx))

    try:
        notifications = manager.load(refresh=refresh, offline=offline)
    except (GitHubClientError, OSError, ValueError) as e:
        print_failure(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if not show_all:
        notifications = visible(notifications)

    notifications = NotificationFilter(
        repository=repository,
        type=subject_type,
        state=state,
        author=author,
        reason=reason,
        unread_only=unread,
    ).apply(notifications)

    if json_output:
        print(json.dumps([n.model_dump(mode="json") for n in notifications], indent=2))
        return

    if notifications:
        if plain:
            console.print(to_text(notifications), highlight=False)
        else:
            console.print(to_table(notifications))

    console.print(f"\nFound {len(notifications)} notifications")
