"""
Tool: Google Calendar Source
Purpose: List the events of one calendar through the Calendar v3 REST API

Usage:
    from gcal.calendar.google import GoogleCalendarSource

    source = GoogleCalendarSource(token)
    event_list = await source.list_events(date_range)

Dependencies:
    - aiohttp (pip install aiohttp)
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from urllib.parse import quote

import aiohttp

from gcal.auth.models import OAuthToken
from gcal.calendar.models import Attendee, CalendarEvent, EventList
from gcal.dates.range import DateRange
from gcal.errors import CollaboratorError
from gcal.logging_config import get_logger

logger = get_logger(__name__)

CALENDAR_API_BASE = "https://www.googleapis.com/calendar/v3"


def parse_event_time(data: dict[str, Any]) -> tuple[datetime | None, bool]:
    """Parse an event ``start``/``end`` object into a local aware datetime.

    Returns:
        (time, all_day); time is None when the object holds nothing usable.
    """
    if data.get("date"):
        try:
            return datetime.fromisoformat(data["date"]).astimezone(), True
        except ValueError:
            return None, True

    value = data.get("dateTime")
    if not value:
        return None, False
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(), False
    except ValueError:
        return None, False


class GoogleCalendarSource:
    """
    Read-only Google Calendar event source.

    Asks the API for single instances ordered by start time, so recurring
    events arrive already expanded.
    """

    def __init__(
        self,
        token: OAuthToken,
        calendar_id: str = "primary",
        max_results: int = 250,
    ):
        self.token = token
        self.calendar_id = calendar_id
        self.max_results = max_results

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": self.token.authorization_header,
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        try:
            async with session.get(url, headers=self._get_headers(), params=params) as resp:
                return await self._handle_response(resp)
        except aiohttp.ClientError as e:
            return {"success": False, "error": f"Request failed: {e!s}"}

    async def _handle_response(self, resp) -> dict[str, Any]:
        try:
            data = await resp.json()
        except (aiohttp.ContentTypeError, ValueError):
            data = {}

        if resp.status == 200:
            return {"success": True, "data": data}
        elif resp.status == 401:
            return {"success": False, "error": "Authentication failed - token may be expired"}
        elif resp.status == 403:
            return {"success": False, "error": "Permission denied - insufficient scopes"}
        elif resp.status == 404:
            return {"success": False, "error": f"Calendar not found: {self.calendar_id}"}
        else:
            error = data.get("error") if isinstance(data, dict) else None
            message = error.get("message") if isinstance(error, dict) else None
            return {"success": False, "error": message or f"HTTP {resp.status}"}

    async def list_events(self, date_range: DateRange) -> EventList:
        """Fetch every event overlapping ``date_range``, following pagination.

        Raises:
            CollaboratorError: the API refused or could not be reached.
        """
        calendar = quote(self.calendar_id, safe="@")
        url = f"{CALENDAR_API_BASE}/calendars/{calendar}/events"
        params = {
            "timeMin": date_range.time_min(),
            "timeMax": date_range.time_max(),
            "showDeleted": "false",
            "singleEvents": "true",
            "orderBy": "startTime",
            "maxResults": str(self.max_results),
        }

        event_list = EventList()
        async with aiohttp.ClientSession() as session:
            while True:
                logger.debug(
                    "events_requested",
                    calendar_id=self.calendar_id,
                    page_token=params.get("pageToken"),
                )
                result = await self._make_request(session, url, params=params)
                if not result.get("success"):
                    raise CollaboratorError(f"unable to retrieve events: {result.get('error')}")

                data = result.get("data", {})
                event_list.summary = data.get("summary", event_list.summary)
                event_list.time_zone = data.get("timeZone", event_list.time_zone)
                for item in data.get("items", []):
                    event = self._parse_event(item)
                    if event is not None:
                        event_list.events.append(event)

                page_token = data.get("nextPageToken")
                if not page_token:
                    break
                params = {**params, "pageToken": page_token}

        return event_list

    def _parse_event(self, data: dict[str, Any]) -> CalendarEvent | None:
        """Parse one API item; None when its start is unusable."""
        start, all_day = parse_event_time(data.get("start") or {})
        if start is None:
            logger.warning("event_start_unparseable", event_id=data.get("id"), start=data.get("start"))
            return None

        end, _ = parse_event_time(data.get("end") or {})
        if end is None and not all_day:
            logger.warning("event_end_unparseable", event_id=data.get("id"), end=data.get("end"))

        attendees = [
            Attendee(
                email=att.get("email", ""),
                name=att.get("displayName"),
                status=att.get("responseStatus", "needsAction"),
                is_organizer=bool(att.get("organizer", False)),
                is_self=bool(att.get("self", False)),
            )
            for att in data.get("attendees", [])
        ]

        return CalendarEvent(
            event_id=data.get("id", ""),
            summary=data.get("summary", ""),
            start=start,
            end=end,
            all_day=all_day,
            attendees=attendees,
            status=data.get("status", "confirmed"),
            recurring_event_id=data.get("recurringEventId"),
        )


__all__ = ["CALENDAR_API_BASE", "GoogleCalendarSource", "parse_event_time"]
