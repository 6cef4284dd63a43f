"""Tests for the event table renderer."""

import io
from datetime import datetime

import pytest

from gcal.calendar.models import Attendee, CalendarEvent, EventList
from gcal.calendar.render import (
    attendee_names,
    format_duration,
    format_participants,
    format_start,
    format_table,
    render_events,
    truncate,
    truncate_participants,
)
from gcal.config import DisplaySettings


def local(*args) -> datetime:
    return datetime(*args).astimezone()


@pytest.fixture
def event_list() -> EventList:
    return EventList(
        summary="alice@example.com",
        events=[
            CalendarEvent(
                event_id="evt1",
                summary="Weekly sync",
                start=local(2024, 3, 15, 9, 0),
                end=local(2024, 3, 15, 9, 30),
                attendees=[
                    Attendee(email="bob@example.com", is_organizer=True),
                    Attendee(email="alice@example.com", is_self=True),
                    Attendee(email="carol@partner.org"),
                ],
            ),
            CalendarEvent(
                event_id="evt2",
                summary="Company holiday",
                start=local(2024, 3, 15),
                end=local(2024, 3, 16),
                all_day=True,
            ),
            CalendarEvent(
                event_id="evt3",
                summary="Design review",
                start=local(2024, 3, 18, 13, 30),
                end=local(2024, 3, 18, 14, 30),
            ),
        ],
    )


class TestNames:
    def test_in_domain_addresses_are_shortened(self):
        organizer, names = attendee_names("example.com", [
            Attendee(email="bob@example.com", is_organizer=True),
            Attendee(email="alice@example.com"),
            Attendee(email="carol@partner.org"),
        ])
        assert organizer == "bob"
        assert names == ["alice", "carol@partner.org"]

    def test_no_domain_keeps_full_addresses(self):
        _, names = attendee_names("", [Attendee(email="alice@example.com")])
        assert names == ["alice@example.com"]

    def test_owner_listed_first(self):
        assert format_participants("alice", ["bob", "alice"], 25) == "alice bob"

    def test_collapses_tail(self):
        names = ["alice", "bob", "carol", "dave", "erin", "frank"]
        assert format_participants("alice", names, 25) == "alice bob + 4 others"

    def test_single_other(self):
        assert truncate_participants(2, ["a", "b", "c"]) == "a b + 1 other"
        assert truncate_participants(1, ["a", "b", "c"]) == "a + 2 others"

    def test_fits_unchanged(self):
        assert format_participants("zed", ["a", "b"], 25) == "a b"


class TestFormatting:
    @pytest.mark.parametrize("s,width,expected", [
        ("short", 10, "short"),
        ("exactly10!", 10, "exactly10!"),
        ("abcdefghij", 8, "abcde..."),
    ])
    def test_truncate(self, s, width, expected):
        assert truncate(s, width) == expected

    @pytest.mark.parametrize("hour,minute,expected", [
        (0, 5, "12:05AM"),
        (9, 0, "9:00AM"),
        (12, 30, "12:30PM"),
        (23, 59, "11:59PM"),
    ])
    def test_format_start(self, hour, minute, expected):
        assert format_start(datetime(2024, 3, 15, hour, minute)) == expected

    @pytest.mark.parametrize("minutes,expected", [(0, "0:00"), (45, "0:45"), (90, "1:30"), (600, "10:00")])
    def test_format_duration(self, minutes, expected):
        assert format_duration(minutes) == expected

    def test_format_table_aligns_columns(self):
        lines = format_table([["a", "bb", "c"], ["aaa", "b", ""]])
        assert lines == ["a   bb c", "aaa b"]

    def test_format_table_empty(self):
        assert format_table([]) == []


class TestRenderEvents:
    def test_groups_by_day_and_skips_all_day(self, event_list):
        out = io.StringIO()
        render_events(event_list, out=out)
        lines = out.getvalue().splitlines()

        assert lines[0].startswith("Fri Mar 15 2024")
        assert lines[1] == "9:00AM 0:30 bob alice carol@partner.org Weekly sync"
        assert lines[2] == ""
        assert lines[3] == "Mon Mar 18"
        assert lines[4] == "1:30PM 1:00   Design review"
        assert "Company holiday" not in out.getvalue()

    def test_summary_width(self, event_list):
        out = io.StringIO()
        render_events(event_list, DisplaySettings(summary_width=8), out=out)
        assert "Weekl..." in out.getvalue()

    def test_long_organizer_dropped(self, event_list):
        out = io.StringIO()
        render_events(event_list, DisplaySettings(organizer_width=2), out=out)
        assert out.getvalue().splitlines()[1].startswith("9:00AM 0:30  alice")

    def test_no_events_prints_nothing(self):
        out = io.StringIO()
        render_events(EventList(summary="alice@example.com"), out=out)
        assert out.getvalue() == ""
