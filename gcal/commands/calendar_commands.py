"""Calendar command handlers: list."""

from __future__ import annotations

import asyncio
import json
import sys

from gcal.auth.oauth import get_valid_token
from gcal.calendar.google import GoogleCalendarSource
from gcal.calendar.models import EventList
from gcal.calendar.render import render_events
from gcal.commands.flags import FlagSet
from gcal.commands.globals import apply_global_options
from gcal.commands.models import EXIT_OK, EXIT_USAGE, CommandDescriptor, UsageError
from gcal.config import GcalConfig
from gcal.dates.range import DateRange, resolve_range
from gcal.errors import UnparseableExpression
from gcal.logging_config import get_logger

logger = get_logger(__name__)


async def fetch_events(
    config: GcalConfig,
    date_range: DateRange,
    calendar_id: str | None = None,
) -> EventList:
    """Authorize if needed and list one calendar over ``date_range``."""
    token = await get_valid_token(config.auth)
    source = GoogleCalendarSource(
        token,
        calendar_id=calendar_id or config.calendar.id,
        max_results=config.calendar.max_results,
    )
    return await source.list_events(date_range)


def handle_list(flags: FlagSet, args: list[str]) -> int | UsageError:
    """List calendar events between two dates, inclusive."""
    flags.add_flag("--calendar", metavar="ID", help="calendar to list instead of the configured one")
    flags.add_flag("--json", action="store_true", help="print events as JSON")

    parsed = flags.parse(args)
    if isinstance(parsed, UsageError):
        return parsed

    config = apply_global_options(parsed.options)

    try:
        date_range = resolve_range(parsed.args)
    except UnparseableExpression as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE
    if isinstance(date_range, UsageError):
        return date_range

    event_list = asyncio.run(fetch_events(config, date_range, parsed.options.calendar))
    logger.debug("events_fetched", count=len(event_list.events))

    if parsed.options.json:
        output = {"range": date_range.to_dict(), **event_list.to_dict()}
        print(json.dumps(output, indent=2, default=str))
    else:
        render_events(event_list, config.display)
    return EXIT_OK


LIST_COMMAND = CommandDescriptor(
    name="list",
    syntax="list [<from> [<to>]]",
    usage="list calendar events",
    handler=handle_list,
)


__all__ = ["LIST_COMMAND", "fetch_events", "handle_list"]
