"""
Notification data models for gh-not.

Defines the Notification model mirrored from the GitHub notifications API,
along with the lifecycle metadata that only ever lives locally.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class LifecycleState(str, Enum):
    """Local lifecycle of a notification."""

    ACTIVE = "active"
    HIDDEN = "hidden"
    PENDING_DELETE = "pending_delete"


class Meta(BaseModel):
    """
    Local bookkeeping attached to a notification.

    Remote fetches always carry the default (ACTIVE) state; HIDDEN and
    PENDING_DELETE are set by the user and drive the merge policy in
    :func:`ghnot.core.notifications.sync.sync`.

    Snapshots written with the older two-boolean layout
    (``{"hidden": true, "to_delete": false}``) are still accepted. When both
    flags are set, ``to_delete`` wins.
    """

    state: LifecycleState = Field(
        default=LifecycleState.ACTIVE,
        description="Lifecycle state (active, hidden, pending_delete)",
    )

    @model_validator(mode="before")
    @classmethod
    def _from_flags(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "state" in data:
            return data
        if data.get("to_delete"):
            return {"state": LifecycleState.PENDING_DELETE}
        if data.get("hidden"):
            return {"state": LifecycleState.HIDDEN}
        return {"state": LifecycleState.ACTIVE}

    @property
    def hidden(self) -> bool:
        return self.state == LifecycleState.HIDDEN

    @property
    def to_delete(self) -> bool:
        return self.state == LifecycleState.PENDING_DELETE


class Repository(BaseModel):
    """Repository a notification belongs to."""

    full_name: str = Field(default="", description="owner/name")


class Author(BaseModel):
    """Author of the notification subject."""

    login: str = Field(default="", description="GitHub login")


class Subject(BaseModel):
    """The issue, pull request, release... a notification is about."""

    title: str = Field(default="", description="Subject title")
    type: str = Field(default="", description="Issue, PullRequest, Release, ...")
    state: str = Field(default="", description="open, closed or merged when known")
    url: str = Field(default="", description="API URL of the subject")


class Notification(BaseModel):
    """
    A single GitHub notification thread.

    The ``id`` is the thread id and is the only field that matters when
    merging snapshots. Everything else is display data that is carried
    through untouched.

    Example:
        >>> n = Notification(id="42", subject=Subject(title="Fix it", type="Issue"))
        >>> n.meta.state
        <LifecycleState.ACTIVE: 'active'>
    """

    id: str = Field(..., description="Thread id")
    unread: bool = Field(default=True, description="Unread on GitHub")
    reason: str = Field(default="", description="Why the user was notified")
    updated_at: datetime | None = Field(default=None, description="Last update on GitHub")
    url: str = Field(default="", description="API URL of the thread")
    repository: Repository = Field(default_factory=Repository)
    author: Author = Field(default_factory=Author)
    subject: Subject = Field(default_factory=Subject)
    meta: Meta = Field(default_factory=Meta)

    @property
    def state(self) -> LifecycleState:
        """Shortcut for ``meta.state``."""
        return self.meta.state

    def with_state(self, state: LifecycleState) -> Notification:
        """Return a copy of this notification in the given lifecycle state."""
        return self.model_copy(update={"meta": Meta(state=state)})

    @classmethod
    def from_gh_api(cls, data: dict[str, Any]) -> Notification:
        """
        Create a Notification from a `gh api notifications` item.

        Args:
            data: One element of the notifications list

        Returns:
            Notification with default (ACTIVE) metadata

        Raises:
            ValueError: If the item has no id
        """
        thread_id = data.get("id")
        if thread_id is None or thread_id == "":
            raise ValueError("Notification payload has no 'id'")

        repository = data.get("repository") or {}
        subject = data.get("subject") or {}

        return cls(
            id=str(thread_id),
            unread=bool(data.get("unread", True)),
            reason=str(data.get("reason") or ""),
            updated_at=data.get("updated_at") or None,
            url=str(data.get("url") or ""),
            repository=Repository(full_name=str(repository.get("full_name") or "")),
            subject=Subject(
                title=str(subject.get("title") or ""),
                type=str(subject.get("type") or ""),
                url=str(subject.get("url") or ""),
            ),
        )
