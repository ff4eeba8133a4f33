"""
Reconciliation of a cached snapshot with a fresh remote fetch.

The merge policy, per local notification:

- present remotely, HIDDEN or PENDING_DELETE locally: keep the local copy
- present remotely, ACTIVE locally: take the remote copy
- absent remotely, PENDING_DELETE locally: drop it
- absent remotely otherwise: keep the local copy

Remote notifications never seen before are appended in fetch order.

A notification only ever disappears when it was marked for deletion AND the
remote stopped reporting it. Note that an empty remote list is treated as
"everything is gone": a fetcher that silently returns a partial list will
cause pending deletions to be dropped early.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from ghnot.core.notifications.collection import to_map
from ghnot.core.notifications.models import LifecycleState, Notification

LOCAL_WINS = (LifecycleState.HIDDEN, LifecycleState.PENDING_DELETE)


def sync(
    local: Sequence[Notification], remote: Sequence[Notification]
) -> list[Notification]:
    """
    Merge the previous local snapshot with a freshly fetched one.

    Pure and total: neither input is modified, nothing is raised.

    Args:
        local: Previous snapshot, lifecycle state meaningful
        remote: Fresh fetch, lifecycle state at its default

    Returns:
        The new local snapshot: known notifications first in their previous
        order, then new ones in fetch order
    """
    remote_by_id = to_map(remote)
    consumed: set[str] = set()
    merged: list[Notification] = []

    for current in local:
        fresh = remote_by_id.get(current.id)

        if fresh is not None:
            consumed.add(current.id)
            if current.meta.state in LOCAL_WINS:
                merged.append(current)
            else:
                merged.append(fresh)
            continue

        if current.meta.state == LifecycleState.PENDING_DELETE:
            continue

        merged.append(current)

    for fresh in remote:
        if fresh.id not in consumed:
            consumed.add(fresh.id)
            merged.append(fresh)

    return merged


class SyncSummary(BaseModel):
    """What a sync changed, by id."""

    added: list[str] = Field(default_factory=list, description="New notifications")
    updated: list[str] = Field(
        default_factory=list, description="Notifications whose content changed"
    )
    dropped: list[str] = Field(
        default_factory=list, description="Pending deletions confirmed by the remote"
    )
    kept: int = Field(default=0, description="Notifications carried over unchanged")

    @property
    def changed(self) -> bool:
        return bool(self.added or self.updated or self.dropped)


def summarize(
    local: Sequence[Notification], merged: Sequence[Notification]
) -> SyncSummary:
    """
    Compare a snapshot before and after :func:`sync`.

    Args:
        local: Snapshot passed to ``sync``
        merged: Snapshot returned by ``sync``

    Returns:
        SyncSummary listing added, updated and dropped ids
    """
    before = to_map(local)
    after = to_map(merged)
    summary = SyncSummary()

    for n in merged:
        previous = before.get(n.id)
        if previous is None:
            summary.added.append(n.id)
        elif previous != n:
            summary.updated.append(n.id)
        else:
            summary.kept += 1

    summary.dropped = [n.id for n in local if n.id not in after]
    return summary
