"""
List operations over notification snapshots.

A snapshot is a plain ``list[Notification]``; the ordered list is always the
system of record and ``NotificationMap`` is only ever used as an index.

Lists coming out of a filter may contain ``None`` placeholders. Only
:func:`compact` accepts those: call it before anything else, in particular
before :func:`sort`, which assumes every slot holds a notification.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from operator import attrgetter

from ghnot.core.notifications.models import LifecycleState, Notification

NotificationMap = dict[str, Notification]


def id_list(notifications: Sequence[Notification]) -> list[str]:
    """Return the ids in order, duplicates included."""
    return [n.id for n in notifications]


def compact(notifications: Sequence[Notification | None]) -> list[Notification]:
    """Drop ``None`` placeholders, keeping the relative order of the rest."""
    return [n for n in notifications if n is not None]


def sort(notifications: list[Notification]) -> None:
    """
    Sort in place by id.

    The sort is stable, so notifications sharing an id keep their original
    order. The list must not contain ``None``; see :func:`compact`.
    """
    notifications.sort(key=attrgetter("id"))


def to_map(notifications: Iterable[Notification]) -> NotificationMap:
    """
    Index notifications by id.

    When an id appears more than once, the last occurrence wins.
    """
    return {n.id: n for n in notifications}


def to_list(notification_map: NotificationMap) -> list[Notification]:
    """
    Return the map values as a list.

    The order carries no meaning; sort the result if it matters.
    """
    return list(notification_map.values())


def uniq(notifications: Iterable[Notification]) -> list[Notification]:
    """Keep the first occurrence of each id, in original order."""
    seen: set[str] = set()
    result: list[Notification] = []
    for n in notifications:
        if n.id in seen:
            continue
        seen.add(n.id)
        result.append(n)
    return result


def filter_from_ids(
    notifications: Iterable[Notification], ids: Iterable[str]
) -> list[Notification]:
    """
    Select the notifications whose id is in ``ids``, in original order.

    Ids that match nothing are ignored.
    """
    wanted = set(ids)
    return [n for n in notifications if n.id in wanted]


def visible(notifications: Iterable[Notification]) -> list[Notification]:
    """Notifications that are neither hidden nor pending deletion."""
    return [n for n in notifications if n.meta.state == LifecycleState.ACTIVE]
