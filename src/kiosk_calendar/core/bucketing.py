from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..domain import CalendarEvent
from .timeline import day_bounds, day_key, effective_span, effective_start, overlaps_range, to_instant


def bucket_events(
    events: Iterable[CalendarEvent],
    days: Sequence[date],
    tz: Optional[tzinfo] = None,
) -> Dict[str, List[CalendarEvent]]:
    """Group ``events`` under the ``yyyy-mm-dd`` key of every day they touch.

    A day shows an event when the event starts no later than the day's last
    millisecond and ends strictly after its midnight, so an event ending at
    midnight does not leak into the following day. Each bucket lists all-day
    events first, then timed events by start.
    """

    grouped: Dict[str, List[CalendarEvent]] = {}
    windows: list[tuple[str, datetime, datetime]] = []
    for day in days:
        key = day_key(day)
        if key in grouped:
            continue
        grouped[key] = []
        windows.append((key, *day_bounds(day, tz)))

    if not windows:
        return grouped

    for event in events:
        span = effective_span(event, tz)
        for key, day_start, day_end in windows:
            if overlaps_range(span, day_start, day_end):
                grouped[key].append(event)

    for key, day_events in grouped.items():
        grouped[key] = sort_day_events(day_events, tz)
    return grouped


def sort_day_events(day_events: Sequence[CalendarEvent], tz: Optional[tzinfo] = None) -> List[CalendarEvent]:
    all_day = [event for event in day_events if event.is_all_day]
    timed = sorted(
        (event for event in day_events if not event.is_all_day),
        key=lambda event: effective_start(event, tz),
    )
    return all_day + timed


def split_all_day(day_events: Iterable[CalendarEvent]) -> Tuple[List[CalendarEvent], List[CalendarEvent]]:
    all_day: list[CalendarEvent] = []
    timed: list[CalendarEvent] = []
    for event in day_events:
        (all_day if event.is_all_day else timed).append(event)
    return all_day, timed


def next_upcoming_event(
    buckets: Dict[str, List[CalendarEvent]],
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> Optional[CalendarEvent]:
    """Return the earliest bucketed event that has not started yet."""

    reference = to_instant(now, tz)
    upcoming: Optional[CalendarEvent] = None
    upcoming_start: Optional[datetime] = None
    for day_events in buckets.values():
        for event in day_events:
            start = effective_start(event, tz)
            if start <= reference:
                continue
            if upcoming_start is None or start < upcoming_start:
                upcoming, upcoming_start = event, start
    return upcoming
