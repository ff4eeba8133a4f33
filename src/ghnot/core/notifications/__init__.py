"""
Notification models, list operations and snapshot reconciliation.

Example:
    >>> from ghnot.core.notifications import Notification, sync
    >>> local = [Notification(id="1")]
    >>> remote = [Notification(id="2")]
    >>> [n.id for n in sync(local, remote)]
    ['1', '2']
"""

from ghnot.core.notifications.collection import (
    NotificationMap,
    compact,
    filter_from_ids,
    id_list,
    sort,
    to_list,
    to_map,
    uniq,
    visible,
)
from ghnot.core.notifications.filters import NotificationFilter
from ghnot.core.notifications.models import (
    Author,
    LifecycleState,
    Meta,
    Notification,
    Repository,
    Subject,
)
from ghnot.core.notifications.sync import SyncSummary, summarize, sync

__all__ = [
    "Author",
    "LifecycleState",
    "Meta",
    "Notification",
    "NotificationFilter",
    "NotificationMap",
    "Repository",
    "Subject",
    "SyncSummary",
    "compact",
    "filter_from_ids",
    "id_list",
    "sort",
    "summarize",
    "sync",
    "to_list",
    "to_map",
    "uniq",
    "visible",
]
