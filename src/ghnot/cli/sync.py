"""
gh-not CLI - Sync command.

Forces a refresh of the local snapshot from GitHub and reports what changed.
"""

import typer
from rich.console import Console

from ghnot.cli.common import build_manager, get_config
from ghnot.cli.errors import ExitCode, print_failure
from ghnot.core.github import GitHubClientError
from ghnot.core.notifications import summarize

console = Console()


def sync(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would change without writing the cache",
    ),
) -> None:
    """
    Fetch notifications from GitHub and merge them into the cache.

    Hidden and done notifications keep their local state; done ones are
    dropped once GitHub stops reporting them.

    Examples:
        gh-not sync             # Refresh now
        gh-not sync --dry-run   # Preview the merge
    """
    manager = build_manager(get_config(ctx))

    try:
        local = manager.load(offline=True)
        merged = manager.preview() if dry_run else manager.refresh()
    except (GitHubClientError, OSError, ValueError) as e:
        print_failure(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    summary = summarize(local, merged)

    prefix = "[yellow]Would sync[/yellow]" if dry_run else "[green]✓[/green] Synced"
    console.print(f"{prefix} {len(merged)} notifications")
    console.print(f"  Added:   {len(summary.added)}")
    console.print(f"  Updated: {len(summary.updated)}")
    console.print(f"  Dropped: {len(summary.dropped)}")

    if ctx.obj and ctx.obj.get("debug"):
        for label, ids in (("added", summary.added), ("dropped", summary.dropped)):
            if ids:
                console.print(f"[dim]{label}: {', '.join(ids)}[/dim]")
