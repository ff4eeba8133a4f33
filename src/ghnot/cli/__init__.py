"""
gh-not CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from ghnot import __version__
from ghnot.cli import list_cmd, mark, sync
from ghnot.cli.common import configure_logging
from ghnot.cli.errors import ExitCode, print_error
from ghnot.core.config import load_config, load_user_env

app = typer.Typer(
    name="gh-not",
    help="Manage GitHub notifications from a local cache",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: ~/.config/gh-not/config.json)",
    ),
) -> None:
    """
    gh-not - GitHub notifications, locally.

    Notifications are cached locally and refreshed from GitHub (through the
    `gh` CLI) once the cache expires. Each refresh is merged into the cache:
    hidden notifications keep their state, done ones are dropped once GitHub
    stops reporting them.

    Quick Start:
        gh auth login                # gh-not uses gh's credentials
        gh-not list                  # Show notifications
        gh-not hide <id>             # Stop seeing one
        gh-not done <id>             # Mark as done on GitHub
    """
    configure_logging(debug)

    # OS env > ~/.config/gh-not/.env
    load_user_env()

    try:
        config = load_config(config_path)
    except ValidationError as e:
        print_error("Invalid configuration", reason=str(e))
        raise typer.Exit(ExitCode.USER_ERROR)

    ctx.obj = {"debug": debug, "config": config}


app.command(name="list")(list_cmd.list_notifications)
app.command(name="ls", hidden=True)(list_cmd.list_notifications)
app.command(name="sync")(sync.sync)
app.command(name="hide")(mark.hide)
app.command(name="unhide")(mark.unhide)
app.command(name="done")(mark.done)


@app.command()
def version() -> None:
    """Show gh-not version and exit."""
    console.print(f"gh-not version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
