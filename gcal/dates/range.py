"""Resolve zero, one or two date tokens into an inclusive local day range."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from gcal.commands.models import UsageError
from gcal.dates.parser import NOW, day_start, has_local_offset, parse_time
from gcal.errors import UnparseableExpression
from gcal.logging_config import get_logger

logger = get_logger(__name__)

END_OF_DAY = timedelta(hours=24) - timedelta(seconds=1)


@dataclass(frozen=True)
class DateRange:
    """Ordered local interval; ``end`` is the last second of its day."""

    start: datetime
    end: datetime

    def time_min(self) -> str:
        """RFC 3339 start with the local UTC offset."""
        return self.start.astimezone().isoformat()

    def time_max(self) -> str:
        return self.end.astimezone().isoformat()

    def to_dict(self) -> dict[str, str]:
        return {"start": self.time_min(), "end": self.time_max()}


def resolve_range(
    tokens: list[str],
    now: datetime | None = None,
) -> DateRange | UsageError:
    """Build a DateRange from the positional arguments of ``list``.

    Raises:
        UnparseableExpression: a token is not a date or offset.
    """
    if len(tokens) > 2:
        return UsageError(f"wrong number of arguments: {', '.join(tokens)}")

    points = [(parse_time(token, now), token) for token in tokens]
    if not points:
        points = [(day_start(now or datetime.now()), NOW)]

    # order on day-start values, then widen the end to cover its whole day
    start, _ = min(points)
    end, end_token = max(points)
    end = end + END_OF_DAY
    if not has_local_offset(end):
        raise UnparseableExpression(end_token)

    logger.debug("range_resolved", start=start.isoformat(), end=end.isoformat())
    return DateRange(start=start, end=end)


__all__ = ["END_OF_DAY", "DateRange", "resolve_range"]
