"""
Unit tests for notification models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ghnot.core.notifications import LifecycleState, Meta, Notification


class TestMeta:
    """Test lifecycle metadata."""

    def test_defaults_to_active(self):
        meta = Meta()
        assert meta.state == LifecycleState.ACTIVE
        assert not meta.hidden
        assert not meta.to_delete

    def test_flags_follow_state(self):
        assert Meta(state=LifecycleState.HIDDEN).hidden
        assert Meta(state=LifecycleState.PENDING_DELETE).to_delete
        assert not Meta(state=LifecycleState.PENDING_DELETE).hidden

    def test_state_from_string(self):
        assert Meta.model_validate({"state": "hidden"}).state == LifecycleState.HIDDEN

    def test_invalid_state(self):
        with pytest.raises(ValidationError):
            Meta.model_validate({"state": "archived"})

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ({"hidden": False, "to_delete": False}, LifecycleState.ACTIVE),
            ({"hidden": True, "to_delete": False}, LifecycleState.HIDDEN),
            ({"hidden": False, "to_delete": True}, LifecycleState.PENDING_DELETE),
            ({"hidden": True, "to_delete": True}, LifecycleState.PENDING_DELETE),
            ({}, LifecycleState.ACTIVE),
        ],
    )
    def test_legacy_boolean_flags(self, flags, expected):
        assert Meta.model_validate(flags).state == expected

    def test_serializes_state_only(self):
        dumped = Meta(state=LifecycleState.HIDDEN).model_dump(mode="json")
        assert dumped == {"state": "hidden"}


class TestNotification:
    """Test the Notification model."""

    def test_minimal(self):
        n = Notification(id="42")
        assert n.state == LifecycleState.ACTIVE
        assert n.subject.title == ""
        assert n.unread

    def test_id_required(self):
        with pytest.raises(ValidationError):
            Notification()  # type: ignore[call-arg]

    def test_with_state_returns_copy(self, make_notification):
        n = make_notification("1")
        hidden = n.with_state(LifecycleState.HIDDEN)

        assert hidden.state == LifecycleState.HIDDEN
        assert n.state == LifecycleState.ACTIVE
        assert hidden.subject == n.subject

    def test_json_round_trip(self, make_notification):
        n = make_notification("1", state=LifecycleState.PENDING_DELETE)
        n = n.model_copy(update={"updated_at": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)})

        assert Notification.model_validate_json(n.model_dump_json()) == n


class TestFromGhApi:
    """Test parsing of `gh api notifications` items."""

    def test_parses_payload(self):
        data = {
            "id": "123",
            "unread": False,
            "reason": "review_requested",
            "updated_at": "2024-05-01T12:00:00Z",
            "url": "https://api.github.com/notifications/threads/123",
            "repository": {"full_name": "nobe4/gh-not", "private": False},
            "subject": {
                "title": "Add sync",
                "type": "PullRequest",
                "url": "https://api.github.com/repos/nobe4/gh-not/pulls/7",
                "latest_comment_url": None,
            },
        }

        n = Notification.from_gh_api(data)

        assert n.id == "123"
        assert not n.unread
        assert n.reason == "review_requested"
        assert n.updated_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert n.repository.full_name == "nobe4/gh-not"
        assert n.subject.type == "PullRequest"
        assert n.subject.url.endswith("/pulls/7")
        assert n.subject.state == ""
        assert n.author.login == ""
        assert n.state == LifecycleState.ACTIVE

    def test_numeric_id_becomes_string(self):
        assert Notification.from_gh_api({"id": 99}).id == "99"

    def test_missing_id(self):
        with pytest.raises(ValueError, match="no 'id'"):
            Notification.from_gh_api({"subject": {"title": "x"}})

    def test_null_nested_objects(self):
        n = Notification.from_gh_api({"id": "1", "repository": None, "subject": None})
        assert n.repository.full_name == ""
        assert n.subject.title == ""
