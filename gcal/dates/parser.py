"""Date expression parsing.

Turns one command-line token into a local day-start:

    now          today
    Mar 5 2024   absolute, month name
    3/5/24       absolute, numeric (also 3/5/2024, 3-5-24, 3-5-2024)
    -3d 2w +1m   relative to today, in days, weeks or months
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from gcal.errors import UnparseableExpression

NOW = "now"


class OffsetUnit(str, Enum):
    """Units accepted after a relative offset."""

    DAY = "d"
    WEEK = "w"
    MONTH = "m"


@dataclass(frozen=True)
class RelativeOffset:
    """A signed distance from today, e.g. ``-3d``."""

    amount: int
    unit: OffsetUnit

    def apply(self, today: datetime) -> datetime:
        if self.unit is OffsetUnit.DAY:
            return today + timedelta(days=self.amount)
        if self.unit is OffsetUnit.WEEK:
            return today + timedelta(days=self.amount * 7)
        return add_months(today, self.amount)


def day_start(t: datetime) -> datetime:
    """Truncate to local midnight."""
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def add_months(t: datetime, months: int) -> datetime:
    """Shift by whole months, keeping the day of month.

    A day that does not exist in the target month rolls forward into the next
    one: Jan 31 + 1 month is Mar 3 (Mar 2 in a leap year).
    """
    index = t.year * 12 + (t.month - 1) + months
    year, month = divmod(index, 12)
    first = datetime(year, month + 1, 1)
    return first + timedelta(days=t.day - 1)


def has_local_offset(t: datetime) -> bool:
    """True when ``t`` can be given a local UTC offset, as API bounds need.

    Fails near datetime.min, e.g. Jan 1 of year 1.
    """
    try:
        t.astimezone()
    except (OverflowError, OSError, ValueError):
        return False
    return True


def _strptime(layout: str) -> Callable[[str], datetime]:
    def parse(token: str) -> datetime:
        return datetime.strptime(token, layout)

    return parse


# Tried in order; the first layout that accepts a token wins.
LAYOUTS: list[tuple[str, Callable[[str], datetime]]] = [
    (layout, _strptime(layout))
    for layout in (
        "%b %d %Y",
        "%B %d %Y",
        "%m/%d/%y",
        "%m/%d/%Y",
        "%m-%d-%y",
        "%m-%d-%Y",
    )
]

_RELATIVE_RE = re.compile(r"^([+-]?[0-9]+)([a-zA-Z])$")


def parse_absolute(token: str) -> datetime | None:
    for _layout, parse in LAYOUTS:
        try:
            return day_start(parse(token))
        except ValueError:
            continue
    return None


def parse_relative(token: str) -> RelativeOffset | None:
    match = _RELATIVE_RE.match(token)
    if not match:
        return None
    try:
        unit = OffsetUnit(match.group(2))
    except ValueError:
        return None
    return RelativeOffset(amount=int(match.group(1)), unit=unit)


def parse_time(token: str, now: datetime | None = None) -> datetime:
    """Parse one token into a local day-start.

    Raises:
        UnparseableExpression: the token is empty or matches nothing.
    """
    if not token:
        raise UnparseableExpression(token)

    today = day_start(now or datetime.now())

    if token == NOW:
        return today

    t = parse_absolute(token)
    if t is None:
        offset = parse_relative(token)
        if offset is None:
            raise UnparseableExpression(token)
        try:
            t = offset.apply(today)
        except (OverflowError, ValueError):
            # outside the datetime range
            raise UnparseableExpression(token) from None

    if not has_local_offset(t):
        raise UnparseableExpression(token)
    return t


__all__ = [
    "LAYOUTS",
    "NOW",
    "OffsetUnit",
    "RelativeOffset",
    "add_months",
    "day_start",
    "has_local_offset",
    "parse_absolute",
    "parse_relative",
    "parse_time",
]
