from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from ..core import bucket_events, parse_instant
from ..domain import CalendarEvent
from .registry import register_api
from .serializers import (
    serialize_day_layout,
    serialize_event,
    serialize_schedule_layout,
    serialize_time_slot,
    serialize_week_layout,
)
from .state import api_state
from .types import DayString, DayStrings, EventRecords, Timestamp


def _parse_day(day: str) -> date:
    try:
        return date.fromisoformat(day)
    except ValueError as exc:
        raise ValueError("day must be formatted YYYY-MM-DD") from exc


def _parse_instant(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    tz = api_state.context.timezone
    return parse_instant(value, tz).astimezone(tz)


def _events(records: List[Dict[str, Any]]) -> List[CalendarEvent]:
    return [CalendarEvent.from_record(record) for record in records]


@register_api(
    "calendar_week_layout",
    description="Bucket events onto the configured week window and lay out overlapping timed events per day.",
    category="calendar",
    tags=("calendar", "week", "layout"),
)
def calendar_week_layout(events: EventRecords, anchor: DayString, now: Optional[Timestamp] = None) -> Dict[str, Any]:
    layout = api_state.layout.layout_week(_events(events), _parse_day(anchor), now=_parse_instant(now))
    return serialize_week_layout(layout)


@register_api(
    "calendar_day_layout",
    description="Return all-day events, timed events, column assignments and grid placements for one day.",
    category="calendar",
    tags=("calendar", "day", "layout"),
)
def calendar_day_layout(events: EventRecords, day: DayString) -> Dict[str, Any]:
    return serialize_day_layout(api_state.layout.layout_day(_events(events), _parse_day(day)))


@register_api(
    "calendar_bucket_days",
    description="Group events under each requested YYYY-MM-DD day, all-day events first.",
    category="calendar",
    tags=("calendar", "bucket"),
)
def calendar_bucket_days(events: EventRecords, days: DayStrings) -> Dict[str, List[dict]]:
    buckets = bucket_events(_events(events), [_parse_day(day) for day in days], api_state.context.timezone)
    return {key: [serialize_event(event) for event in day_events] for key, day_events in buckets.items()}


@register_api(
    "calendar_rolling_schedule",
    description="Lay out timed events in the rolling window around now, with hour marks and the now line.",
    category="calendar",
    tags=("calendar", "schedule", "layout"),
)
def calendar_rolling_schedule(events: EventRecords, now: Optional[Timestamp] = None) -> Dict[str, Any]:
    return serialize_schedule_layout(api_state.layout.rolling_schedule(_events(events), _parse_instant(now)))


@register_api(
    "calendar_default_event_times",
    description="Suggest start and end times for a new event, snapped to the next half hour.",
    category="calendar",
    tags=("calendar", "create"),
)
def calendar_default_event_times(now: Optional[Timestamp] = None, duration_minutes: Optional[int] = None) -> Dict[str, Any]:
    slot = api_state.layout.default_event_times(_parse_instant(now), duration_minutes)
    return serialize_time_slot(slot)


@register_api(
    "calendar_next_week_events",
    description="Return events in the week following the configured window, sorted by start.",
    category="calendar",
    tags=("calendar", "week"),
)
def calendar_next_week_events(events: EventRecords, anchor: DayString) -> Dict[str, Any]:
    selected = api_state.layout.next_week_events(_events(events), _parse_day(anchor))
    return {"anchor": anchor, "events": [serialize_event(event) for event in selected]}
