"""
GitHub integration for gh-not.

Provides the notifications client used to refresh the local snapshot.
"""

from ghnot.core.github.client import (
    GitHubClientError,
    GitHubNotificationsClient,
    NotificationFetcher,
)

__all__ = ["GitHubClientError", "GitHubNotificationsClient", "NotificationFetcher"]
