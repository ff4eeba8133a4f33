"""
Notification manager.

Wires an expiring cache, a fetcher and the sync engine together:

    read cache -> expired? -> fetch -> sync -> write cache

The manager holds the current snapshot for one cache location. Nothing here
is module-level, so several managers over different caches can coexist.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import TypeAdapter

from ghnot.core.cache import ExpiringReadWriter
from ghnot.core.github import NotificationFetcher
from ghnot.core.notifications import LifecycleState, Notification, sync
from ghnot.core.notifications.sync import LOCAL_WINS

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(list[Notification])


class NotificationManager:
    """
    Loads, refreshes and persists the local notification snapshot.

    ``dirty`` is set once a lifecycle action changes the snapshot and cleared
    by load, refresh and save.

    Example:
        >>> manager = NotificationManager(FileCache.from_hours(1, path), client)
        >>> notifications = manager.load()
        >>> manager.hide(["123"])
        >>> manager.save()
    """

    def __init__(
        self,
        cache: ExpiringReadWriter,
        fetcher: NotificationFetcher | None = None,
    ) -> None:
        """
        Initialize the manager.

        Args:
            cache: Where the snapshot is persisted
            fetcher: Source of fresh notifications; without one the manager
                only ever works from the cache
        """
        self.cache = cache
        self.fetcher = fetcher
        self.notifications: list[Notification] = []
        self.dirty = False

    def load(self, refresh: bool = False, offline: bool = False) -> list[Notification]:
        """
        Load the snapshot, refreshing it from the remote when needed.

        Args:
            refresh: Fetch even if the cache is still fresh
            offline: Never fetch, even if the cache is expired

        Returns:
            The current snapshot

        Raises:
            OSError: If the cache cannot be read or written
            ValueError: If the cached snapshot is malformed
            GitHubClientError: If the fetch fails; the cache is left untouched
        """
        self.notifications = self.read_cached()
        self.dirty = False

        if self.fetcher is None or offline:
            return self.notifications

        if refresh or self.cache.expired():
            self.refresh()

        return self.notifications

    def read_cached(self) -> list[Notification]:
        """Decode the cached snapshot; an empty list on cold start."""
        return _snapshot_adapter.validate_python(self.cache.read(default=[]))

    def refresh(self) -> list[Notification]:
        """
        Fetch, merge with the current snapshot and persist.

        Returns:
            The merged snapshot
        """
        logger.debug("refreshing notifications")
        remote = self._fetch()
        merged = sync(self.notifications, remote)
        self.cache.write(merged)
        logger.debug(
            "synced %d local with %d remote into %d notifications",
            len(self.notifications),
            len(remote),
            len(merged),
        )
        self.notifications = merged
        self.dirty = False
        return merged

    def preview(self) -> list[Notification]:
        """Merge with a fresh fetch without touching the snapshot or the cache."""
        return sync(self.notifications, self._fetch())

    def save(self) -> None:
        """Persist the current snapshot."""
        self.cache.write(self.notifications)
        self.dirty = False

    def hide(self, ids: Iterable[str]) -> list[Notification]:
        """Hide notifications; returns the ones that were found."""
        return self._set_state(ids, LifecycleState.HIDDEN)

    def unhide(self, ids: Iterable[str]) -> list[Notification]:
        """Make notifications visible again; returns the ones that were found."""
        return self._set_state(ids, LifecycleState.ACTIVE)

    def done(self, ids: Iterable[str]) -> list[Notification]:
        """
        Mark notifications as done remotely and pending deletion locally.

        They leave the snapshot on the first refresh that no longer reports
        them.

        Returns:
            The notifications that were found

        Raises:
            GitHubClientError: If the remote call fails; notifications handled
                before the failure keep their new state
        """
        wanted = set(ids)
        updated: list[Notification] = []
        for index, n in enumerate(self.notifications):
            if n.id not in wanted:
                continue
            if self.fetcher is not None:
                self.fetcher.mark_done(n.id)
            self._replace(index, LifecycleState.PENDING_DELETE)
            updated.append(self.notifications[index])
        return updated

    def _set_state(self, ids: Iterable[str], state: LifecycleState) -> list[Notification]:
        wanted = set(ids)
        updated: list[Notification] = []
        for index, n in enumerate(self.notifications):
            if n.id in wanted:
                self._replace(index, state)
                updated.append(self.notifications[index])
        return updated

    def _replace(self, index: int, state: LifecycleState) -> None:
        current = self.notifications[index]
        if current.meta.state != state:
            self.notifications[index] = current.with_state(state)
            self.dirty = True

    def _fetch(self) -> list[Notification]:
        if self.fetcher is None:
            raise RuntimeError("No fetcher configured")
        # sync keeps the local copy of these, so their subject details are unused
        kept = [n.id for n in self.notifications if n.meta.state in LOCAL_WINS]
        return self.fetcher.fetch(skip_enrich=kept)
