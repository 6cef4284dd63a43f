"""Date expressions: token parsing and range resolution."""

from gcal.dates.parser import RelativeOffset, parse_time
from gcal.dates.range import DateRange, resolve_range

__all__ = [
    "DateRange",
    "RelativeOffset",
    "parse_time",
    "resolve_range",
]
