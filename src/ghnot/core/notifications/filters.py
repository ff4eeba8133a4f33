"""
Field filters for notification lists.

These are deliberately simple equality checks; there is no expression
language. Filtering goes through :func:`filter_from_ids` so that the result
keeps the snapshot order.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from ghnot.core.notifications.collection import filter_from_ids
from ghnot.core.notifications.models import Notification


def _same(expected: str | None, actual: str) -> bool:
    return expected is None or expected.lower() == actual.lower()


class NotificationFilter(BaseModel):
    """
    Criteria a notification must satisfy to be listed.

    Unset criteria match everything. Comparisons are case-insensitive;
    ``repository`` also matches on a substring of the full name.

    Example:
        >>> f = NotificationFilter(type="PullRequest", state="open")
        >>> f.is_empty()
        False
    """

    repository: str | None = Field(default=None, description="owner/name or part of it")
    type: str | None = Field(default=None, description="Subject type")
    state: str | None = Field(default=None, description="Subject state")
    author: str | None = Field(default=None, description="Author login")
    reason: str | None = Field(default=None, description="Notification reason")
    unread_only: bool = Field(default=False, description="Only unread notifications")

    def is_empty(self) -> bool:
        return self == NotificationFilter()

    def matches(self, notification: Notification) -> bool:
        if self.unread_only and not notification.unread:
            return False
        if self.repository is not None and (
            self.repository.lower() not in notification.repository.full_name.lower()
        ):
            return False
        return (
            _same(self.type, notification.subject.type)
            and _same(self.state, notification.subject.state)
            and _same(self.author, notification.author.login)
            and _same(self.reason, notification.reason)
        )

    def apply(self, notifications: Sequence[Notification]) -> list[Notification]:
        """Return the matching notifications, in their original order."""
        if self.is_empty():
            return list(notifications)
        return filter_from_ids(
            notifications, (n.id for n in notifications if self.matches(n))
        )
