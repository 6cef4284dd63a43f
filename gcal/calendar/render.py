"""
Tool: Event Renderer
Purpose: Print events as a borderless text table, one block per day

    Fri Mar 15 2024 PDT
    9:00AM  0:30 alice bob carol + 2 others    Weekly sync
    1:30PM  1:00       alice dave              Design review

    Mon Mar 18
    ...

All-day events are left out. Addresses in the calendar owner's domain are
shortened to their local part and the owner is listed first.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

from gcal.calendar.models import Attendee, CalendarEvent, EventList
from gcal.config import DisplaySettings

FIRST_DAY_FORMAT = "%a %b %d %Y %Z"
DAY_FORMAT = "%a %b %d"


def attendee_names(domain: str, attendees: list[Attendee]) -> tuple[str, list[str]]:
    """Split attendees into (organizer, other names), shortening in-domain addresses."""
    organizer = ""
    names: list[str] = []
    for attendee in attendees:
        name = attendee.local_part if domain and attendee.domain == domain else attendee.email
        if attendee.is_organizer:
            organizer = name
        else:
            names.append(name)
    return organizer, names


def truncate(s: str, width: int) -> str:
    if len(s) <= width:
        return s
    return s[: width - 3] + "..."


def truncate_participants(count: int, names: list[str]) -> str:
    others = len(names) - count
    participants = f"{' '.join(names[:count])} + {others} other"
    if count + 1 < len(names):
        participants += "s"
    return participants


def format_participants(owner: str, names: list[str], width: int) -> str:
    """Join names with the owner first, collapsing the tail into "+ N others"."""
    names = list(names)
    if owner in names:
        names.remove(owner)
        names.insert(0, owner)

    participants = " ".join(names)
    if len(participants) <= width:
        return participants

    count = 1
    while len(truncate_participants(count, names)) <= width:
        count += 1
    return truncate_participants(count - 1, names)


def format_start(start: datetime) -> str:
    hour = start.hour % 12 or 12
    suffix = "AM" if start.hour < 12 else "PM"
    return f"{hour}:{start.minute:02d}{suffix}"


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}:{minutes % 60:02d}"


def format_row(
    event: CalendarEvent,
    event_list: EventList,
    display: DisplaySettings,
) -> list[str]:
    organizer, names = attendee_names(event_list.domain, event.attendees)
    if len(organizer) > display.organizer_width:
        organizer = ""

    return [
        format_start(event.start),
        format_duration(event.duration_minutes),
        organizer,
        format_participants(event_list.owner, names, display.participants_width),
        truncate(event.summary, display.summary_width),
    ]


def format_table(rows: list[list[str]]) -> list[str]:
    """Left-align columns separated by a single space."""
    if not rows:
        return []
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    return [
        " ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]


def render_events(
    event_list: EventList,
    display: DisplaySettings | None = None,
    out: TextIO | None = None,
) -> None:
    """Write the day-grouped table for ``event_list`` to ``out`` (stdout)."""
    display = display or DisplaySettings()
    out = out or sys.stdout

    current_day = None
    rows: list[list[str]] = []

    for event in event_list.events:
        if event.all_day or event.start is None:
            continue

        day = event.start.date()
        if day != current_day:
            if current_day is None:
                print(event.start.strftime(FIRST_DAY_FORMAT), file=out)
            else:
                for line in format_table(rows):
                    print(line, file=out)
                rows = []
                print(file=out)
                print(event.start.strftime(DAY_FORMAT), file=out)
            current_day = day

        rows.append(format_row(event, event_list, display))

    for line in format_table(rows):
        print(line, file=out)


__all__ = [
    "attendee_names",
    "format_duration",
    "format_participants",
    "format_start",
    "format_table",
    "render_events",
    "truncate",
    "truncate_participants",
]
