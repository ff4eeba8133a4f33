"""
Pytest configuration and shared fixtures.

Provides notification factories, a fake fetcher, fixed clocks and an
isolated XDG environment used across the test suite.
"""

from collections.abc import Callable, Collection
from pathlib import Path

import pytest

from ghnot.core.notifications import (
    Author,
    LifecycleState,
    Meta,
    Notification,
    Repository,
    Subject,
)

# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def make_notification() -> Callable[..., Notification]:
    """Factory for notifications with sensible display attributes."""

    def _make(
        notification_id: str,
        state: LifecycleState = LifecycleState.ACTIVE,
        title: str | None = None,
        subject_type: str = "Issue",
        subject_state: str = "open",
        repository: str = "nobe4/gh-not",
        author: str = "alice",
        unread: bool = True,
        reason: str = "mention",
    ) -> Notification:
        return Notification(
            id=notification_id,
            unread=unread,
            reason=reason,
            repository=Repository(full_name=repository),
            author=Author(login=author),
            subject=Subject(
                title=title if title is not None else f"Notification {notification_id}",
                type=subject_type,
                state=subject_state,
            ),
            meta=Meta(state=state),
        )

    return _make


@pytest.fixture
def sample_notifications(make_notification) -> list[Notification]:
    """Three notifications: an open issue, a merged PR, a hidden release."""
    return [
        make_notification("1", title="Crash on startup"),
        make_notification(
            "2",
            title="Add table output",
            subject_type="PullRequest",
            subject_state="merged",
            author="bob",
            reason="review_requested",
            unread=False,
        ),
        make_notification(
            "3",
            title="v1.0.0",
            subject_type="Release",
            subject_state="",
            repository="cli/cli",
            state=LifecycleState.HIDDEN,
        ),
    ]


# ==============================================================================
# Collaborator Fixtures
# ==============================================================================


class FakeFetcher:
    """In-memory NotificationFetcher recording what it was asked to do."""

    def __init__(self, notifications: list[Notification] | None = None) -> None:
        self.notifications = list(notifications or [])
        self.fetch_count = 0
        self.done_ids: list[str] = []
        self.error: Exception | None = None
        self.skip_enrich: list[str] = []

    def fetch(self, skip_enrich: Collection[str] = ()) -> list[Notification]:
        self.fetch_count += 1
        self.skip_enrich = list(skip_enrich)
        if self.error is not None:
            raise self.error
        return list(self.notifications)

    def mark_done(self, notification_id: str) -> None:
        if self.error is not None:
            raise self.error
        self.done_ids.append(notification_id)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


class FixedClock:
    """Clock returning a settable POSIX timestamp."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, Path]:
    """Point XDG directories at tmp_path and clear GH_NOT_* variables."""
    config_home = tmp_path / "config"
    cache_home = tmp_path / "cache"
    config_home.mkdir()
    cache_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache_home))
    for name in (
        "GH_NOT_CACHE_TTL_HOURS",
        "GH_NOT_CACHE_PATH",
        "GH_NOT_INCLUDE_READ",
        "GH_NOT_ENRICH_SUBJECTS",
    ):
        monkeypatch.delenv(name, raising=False)

    return {
        "config_dir": config_home / "gh-not",
        "cache_file": cache_home / "gh-not" / "notifications.json",
    }
