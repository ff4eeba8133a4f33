"""
Unit tests for notification filters and rendering.
"""

from rich.console import Console

from ghnot.core.notifications import NotificationFilter, id_list
from ghnot.core.notifications.view import (
    pretty_state,
    pretty_type,
    to_line,
    to_table,
    to_text,
)


class TestNotificationFilter:
    """Test NotificationFilter."""

    def test_empty_filter_keeps_everything(self, sample_notifications):
        f = NotificationFilter()

        assert f.is_empty()
        assert f.apply(sample_notifications) == sample_notifications

    def test_type_and_state(self, sample_notifications):
        f = NotificationFilter(type="pullrequest", state="MERGED")
        assert id_list(f.apply(sample_notifications)) == ["2"]

    def test_repository_substring(self, sample_notifications):
        assert id_list(NotificationFilter(repository="nobe4").apply(sample_notifications)) == [
            "1",
            "2",
        ]
        assert id_list(NotificationFilter(repository="cli/cli").apply(sample_notifications)) == [
            "3"
        ]

    def test_author_and_reason(self, sample_notifications):
        f = NotificationFilter(author="bob", reason="review_requested")
        assert id_list(f.apply(sample_notifications)) == ["2"]

    def test_unread_only(self, sample_notifications):
        f = NotificationFilter(unread_only=True)
        assert id_list(f.apply(sample_notifications)) == ["1", "3"]

    def test_no_match(self, sample_notifications):
        assert NotificationFilter(author="nobody").apply(sample_notifications) == []

    def test_preserves_order(self, make_notification):
        ns = [make_notification(i) for i in ("c", "a", "b")]
        assert id_list(NotificationFilter(type="Issue").apply(ns)) == ["c", "a", "b"]


class TestView:
    """Test rendering helpers."""

    def test_pretty_markers(self, sample_notifications):
        issue, pr, release = sample_notifications

        assert "IS" in pretty_type(issue)
        assert "PR" in pretty_type(pr)
        assert "T?" in pretty_type(release)
        assert "OP" in pretty_state(issue)
        assert "MG" in pretty_state(pr)
        assert "S?" in pretty_state(release)

    def test_to_line(self, sample_notifications):
        line = to_line(sample_notifications[0])
        assert "nobe4/gh-not by alice: 'Crash on startup'" in line

    def test_to_line_escapes_markup(self, make_notification):
        line = to_line(make_notification("1", title="[bold]not markup[/bold]"))
        assert "\\[bold]" in line

    def test_to_text_one_line_each(self, sample_notifications):
        assert len(to_text(sample_notifications).splitlines()) == 3

    def test_to_table_renders(self, sample_notifications):
        console = Console(record=True, width=200)
        console.print(to_table(sample_notifications))
        output = console.export_text()

        assert "Crash on startup" in output
        assert "cli/cli" in output
        assert "MG" in output

    def test_to_table_without_ids(self, sample_notifications):
        table = to_table(sample_notifications, show_ids=False)
        assert [c.header for c in table.columns][0] == "Type"
