"""Time normalisation shared by the layout algorithms.

Comparisons happen on aware UTC instants. Timed events keep the instant they
were stored with, so the repeated hour of a daylight-saving fall-back still
orders and overlaps correctly. Naive values are read as wall clock in the
viewer's timezone.

All-day events keep the calendar date they were written with: an all-day
event stored as ``2024-03-10T00:00:00Z`` covers March 10 for every viewer,
even one sitting west of UTC where that instant is still March 9. Its span
runs from local midnight of that date in the viewer's zone.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Tuple

from ..domain import CalendarEvent

END_OF_DAY = time(23, 59, 59, 999000)


def localize(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Attach ``tz`` (host zone when ``None``) to a naive wall-clock value."""

    if value.tzinfo is not None:
        return value
    if tz is None:
        return value.astimezone()
    return value.replace(tzinfo=tz)


def to_instant(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    return localize(value, tz).astimezone(timezone.utc)


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``value`` as a naive wall-clock datetime in ``tz`` for display."""

    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)


def parse_instant(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing ``Z`` means UTC and naive values get ``tz``."""

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError("timestamps must be ISO-8601, e.g. 2024-03-10T09:30:00+01:00") from exc
    return localize(parsed, tz)


def as_day(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def day_key(day: date) -> str:
    return as_day(day).isoformat()


def local_midnight(day: date, tz: Optional[tzinfo] = None) -> datetime:
    return to_instant(datetime.combine(as_day(day), time.min), tz)


def day_bounds(day: date, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """First and last millisecond of ``day`` in ``tz``, as UTC instants."""

    target = as_day(day)
    return local_midnight(target, tz), to_instant(datetime.combine(target, END_OF_DAY), tz)


def effective_start(event: CalendarEvent, tz: Optional[tzinfo] = None) -> datetime:
    if event.is_all_day:
        return local_midnight(event.start_time.date(), tz)
    return to_instant(event.start_time, tz)


def effective_end(event: CalendarEvent, tz: Optional[tzinfo] = None) -> datetime:
    if event.is_all_day:
        return local_midnight(event.end_time.date(), tz)
    return to_instant(event.end_time, tz)


def effective_span(event: CalendarEvent, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    return effective_start(event, tz), effective_end(event, tz)


def overlaps_range(span: Tuple[datetime, datetime], range_start: datetime, range_end: datetime) -> bool:
    start, end = span
    return start <= range_end and end > range_start
