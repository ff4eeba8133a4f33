"""
Standardized error handling and exit codes for the gh-not CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

import shutil
from enum import IntEnum

from pydantic import ValidationError
from rich.console import Console

from ghnot.core.github import GitHubClientError, GitHubNotificationsClient

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for gh-not CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error (GitHub, filesystem, corrupt cache)."""

    USER_ERROR = 2
    """User input error (actionable by user)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Failed to fetch notifications",
        ...     reason="gh: not logged in",
        ...     solution="gh auth login",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_failure(error: Exception) -> None:
    """Print a message for an error raised while loading or saving notifications."""
    if isinstance(error, GitHubClientError):
        print_error(
            "Failed to talk to GitHub",
            reason=str(error),
            solution=_gh_hint(),
        )
    elif isinstance(error, (ValidationError, ValueError)):
        print_error(
            "The notification cache is corrupt",
            reason=str(error),
            solution="gh-not sync  # after removing the cache file",
        )
    elif isinstance(error, OSError):
        print_error("Cannot access the notification cache", reason=str(error))
    else:
        print_error(str(error))


def print_unknown_ids_error(ids: list[str]) -> None:
    """Print error for ids missing from the snapshot."""
    print_error(
        f"No notification with id {', '.join(ids)}",
        solution="gh-not list --all  # to see every id, hidden ones included",
    )


def _gh_hint() -> str:
    """Suggest the next step depending on the state of the gh install."""
    if shutil.which("gh") is None:
        return "install gh from https://cli.github.com/"
    if not GitHubNotificationsClient.is_gh_available():
        return "gh auth login"
    return "gh auth status  # or retry with --offline"
