"""
Tool: Calendar Models
Purpose: Event records handed from the event source to the renderer

Usage:
    from gcal.calendar.models import Attendee, CalendarEvent, EventList
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Attendee:
    """
    Calendar event attendee.
    """

    email: str
    name: str | None = None
    status: str = "needsAction"  # needsAction, accepted, declined, tentative
    is_organizer: bool = False
    is_self: bool = False

    @property
    def local_part(self) -> str:
        return self.email.split("@", 1)[0]

    @property
    def domain(self) -> str:
        parts = self.email.split("@", 1)
        return parts[1] if len(parts) == 2 else ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CalendarEvent:
    """
    One event instance in local time.

    All-day events carry dates at midnight and ``all_day`` set; timed events
    carry local datetimes. ``end`` is None when the source gave no usable end.
    """

    event_id: str
    summary: str = ""
    start: datetime | None = None
    end: datetime | None = None
    all_day: bool = False
    attendees: list[Attendee] = field(default_factory=list)
    status: str = "confirmed"
    recurring_event_id: str | None = None

    @property
    def duration_minutes(self) -> int:
        if self.start is None or self.end is None:
            return 0
        return int((self.end - self.start).total_seconds() // 60)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["start"] = self.start.isoformat() if self.start else None
        d["end"] = self.end.isoformat() if self.end else None
        return d


@dataclass
class EventList:
    """Result of listing one calendar.

    ``summary`` is the calendar title, which for a primary calendar is the
    owner's email address.
    """

    summary: str = ""
    time_zone: str = ""
    events: list[CalendarEvent] = field(default_factory=list)

    @property
    def owner(self) -> str:
        return self.summary.split("@", 1)[0]

    @property
    def domain(self) -> str:
        parts = self.summary.split("@", 1)
        return parts[1] if len(parts) == 2 else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "time_zone": self.time_zone,
            "events": [e.to_dict() for e in self.events],
        }
