"""
GitHub CLI wrapper for gh-not.

Fetches notifications and marks threads as done via the `gh` CLI tool, so
authentication is whatever `gh auth login` set up.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Collection
from typing import Any, Protocol, runtime_checkable

from ghnot.core.notifications.models import Author, Notification

logger = logging.getLogger(__name__)

API_PREFIX = "https://api.github.com/"
ENRICHED_TYPES = ("Issue", "PullRequest")


class GitHubClientError(Exception):
    """Error from GitHub client operations."""

    pass


@runtime_checkable
class NotificationFetcher(Protocol):
    """
    Protocol for whatever supplies fresh notifications.

    ``fetch`` returns notifications with default metadata, in the order the
    remote reports them; ids in ``skip_enrich`` may be returned without
    subject details. ``mark_done`` asks the remote to drop a thread.
    """

    def fetch(self, skip_enrich: Collection[str] = ()) -> list[Notification]:
        ...

    def mark_done(self, notification_id: str) -> None:
        ...


class GitHubNotificationsClient:
    """
    Client for the GitHub notifications API via `gh` CLI.

    Example:
        >>> client = GitHubNotificationsClient(include_read=False)
        >>> notifications = client.fetch()
        >>> client.mark_done(notifications[0].id)
    """

    def __init__(self, include_read: bool = False, enrich_subjects: bool = True) -> None:
        """
        Initialize GitHubNotificationsClient.

        Args:
            include_read: Also fetch notifications already marked as read
            enrich_subjects: Look up state and author of issues and pull requests
        """
        self.include_read = include_read
        self.enrich_subjects = enrich_subjects

    @staticmethod
    def is_gh_available() -> bool:
        """
        Check if GitHub CLI is installed and authenticated.

        Returns:
            True if gh is available and authenticated
        """
        try:
            result = subprocess.run(
                ["gh", "auth", "status"],
                capture_output=True,
                text=True,
                check=False,
            )
            return result.returncode == 0
        except (OSError, FileNotFoundError):
            return False

    def fetch(self, skip_enrich: Collection[str] = ()) -> list[Notification]:
        """
        Fetch all notification threads, following pagination.

        Args:
            skip_enrich: Ids whose subject details are not needed

        Returns:
            Notifications in the order GitHub returns them

        Raises:
            GitHubClientError: If gh fails or returns unparseable output
        """
        endpoint = "notifications?all=true" if self.include_read else "notifications"
        output = self._gh(["api", "--paginate", "--jq", ".[]", endpoint])

        notifications: list[Notification] = []
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
                notifications.append(Notification.from_gh_api(data))
            except (json.JSONDecodeError, ValueError) as e:
                raise GitHubClientError(f"Failed to parse GitHub API response: {e}")

        logger.debug("fetched %d notifications", len(notifications))

        if self.enrich_subjects:
            skip = set(skip_enrich)
            notifications = [n if n.id in skip else self._enrich(n) for n in notifications]

        return notifications

    def mark_done(self, notification_id: str) -> None:
        """
        Mark a notification thread as done on GitHub.

        Args:
            notification_id: Thread id

        Raises:
            GitHubClientError: If the thread could not be marked
        """
        self._gh(["api", "--method", "DELETE", f"notifications/threads/{notification_id}"])
        logger.debug("marked thread %s as done", notification_id)

    def _enrich(self, notification: Notification) -> Notification:
        """Fill subject state and author from the subject itself."""
        subject = notification.subject
        if subject.type not in ENRICHED_TYPES or not subject.url:
            return notification

        try:
            data = json.loads(self._gh(["api", _endpoint(subject.url)]))
        except (GitHubClientError, json.JSONDecodeError) as e:
            logger.warning("could not enrich notification %s: %s", notification.id, e)
            return notification

        if not isinstance(data, dict):
            logger.warning(
                "could not enrich notification %s: unexpected response %s",
                notification.id,
                type(data).__name__,
            )
            return notification

        user = data.get("user")
        login = user.get("login") if isinstance(user, dict) else None

        return notification.model_copy(
            update={
                "subject": subject.model_copy(update={"state": _subject_state(data)}),
                "author": Author(login=str(login or "")),
            }
        )

    @staticmethod
    def _gh(args: list[str]) -> str:
        try:
            result = subprocess.run(
                ["gh", *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, FileNotFoundError) as e:
            raise GitHubClientError(f"Failed to run gh command: {e}")

        if result.returncode != 0:
            error_msg = result.stderr.strip() or "Unknown error"
            raise GitHubClientError(f"gh {args[0]} failed: {error_msg}")

        return result.stdout


def _endpoint(url: str) -> str:
    if url.startswith(API_PREFIX):
        return url[len(API_PREFIX):]
    return url


def _subject_state(data: dict[str, Any]) -> str:
    if data.get("merged") or data.get("merged_at"):
        return "merged"
    return str(data.get("state") or "")
