from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import List, Optional

from ..domain import CalendarEvent, HourMark, ScheduleWindow, TimeGridPlacement
from .timeline import as_day, effective_span, to_instant, to_local


def _hours_since(midnight: datetime, value: datetime) -> float:
    return (value - midnight).total_seconds() / 3600


def place_on_time_grid(
    event: CalendarEvent,
    day: date,
    *,
    day_start_hour: float = 6,
    day_end_hour: float = 22,
    min_height_hours: float = 0.5,
    tz: Optional[tzinfo] = None,
) -> Optional[TimeGridPlacement]:
    """Position ``event`` inside the visible hours of ``day``.

    Hours are wall-clock hours in ``tz`` counted from the local midnight of
    ``day``, so a 9 AM event sits at hour 9 even on a daylight-saving switch.
    Returns ``None`` when the event lies wholly outside the visible hours.
    Short and zero-length events are stretched to ``min_height_hours``.
    """

    if day_end_hour <= day_start_hour:
        raise ValueError("day_end_hour must be after day_start_hour")

    midnight = datetime.combine(as_day(day), time.min)
    start, end = (to_local(value, tz) for value in effective_span(event, tz))
    clamped_start = max(_hours_since(midnight, start), day_start_hour)
    clamped_end = min(_hours_since(midnight, end), day_end_hour)
    if clamped_start >= day_end_hour or clamped_end <= day_start_hour:
        return None

    return TimeGridPlacement(
        top_hours=clamped_start - day_start_hour,
        height_hours=max(clamped_end - clamped_start, min_height_hours),
        visible_hours=day_end_hour - day_start_hour,
    )


def fixed_window(
    day: date,
    day_start_hour: float = 6,
    day_end_hour: float = 22,
    tz: Optional[tzinfo] = None,
) -> ScheduleWindow:
    if day_end_hour <= day_start_hour:
        raise ValueError("day_end_hour must be after day_start_hour")
    midnight = datetime.combine(as_day(day), time.min)
    return ScheduleWindow(
        start=to_instant(midnight + timedelta(hours=day_start_hour), tz),
        end=to_instant(midnight + timedelta(hours=day_end_hour), tz),
    )


def rolling_window(
    now: datetime,
    offset_minutes: int = 60,
    duration_hours: float = 8,
    tz: Optional[tzinfo] = None,
) -> ScheduleWindow:
    """Window opening ``offset_minutes`` before ``now`` and lasting ``duration_hours``.

    The window follows the clock and freely crosses midnight.
    """

    if duration_hours <= 0:
        raise ValueError("duration_hours must be positive")
    start = to_instant(now, tz) - timedelta(minutes=offset_minutes)
    return ScheduleWindow(start=start, end=start + timedelta(hours=duration_hours))


def place_in_window(
    event: CalendarEvent,
    window: ScheduleWindow,
    *,
    min_height_hours: float = 0.5,
    tz: Optional[tzinfo] = None,
) -> Optional[TimeGridPlacement]:
    """Position ``event`` by elapsed time from the start of ``window``."""

    start, end = effective_span(event, tz)
    clamped_start = max(start, window.start)
    clamped_end = min(end, window.end)
    if clamped_start >= window.end or clamped_end <= window.start:
        return None

    top = window.offset_hours(clamped_start)
    return TimeGridPlacement(
        top_hours=top,
        height_hours=max(window.offset_hours(clamped_end) - top, min_height_hours),
        visible_hours=window.visible_hours,
    )


def hour_marks(window: ScheduleWindow, tz: Optional[tzinfo] = None) -> List[HourMark]:
    """Full local hours inside ``window``, both edges included."""

    local_start = to_local(window.start, tz)
    cursor = local_start.replace(minute=0, second=0, microsecond=0)
    if cursor < local_start:
        cursor += timedelta(hours=1)

    marks: list[HourMark] = []
    previous: Optional[datetime] = None
    while True:
        instant = to_instant(cursor, tz)
        if instant > window.end:
            break
        # A skipped spring-forward hour maps onto the next one.
        if instant >= window.start and (previous is None or instant > previous):
            marks.append(HourMark(cursor.hour, window.offset_hours(instant), window.visible_hours))
            previous = instant
        cursor += timedelta(hours=1)
    return marks


def now_line_offset(now: datetime, window: ScheduleWindow, tz: Optional[tzinfo] = None) -> Optional[float]:
    """Hours from the window start to ``now``, or ``None`` when ``now`` is not visible."""

    instant = to_instant(now, tz)
    if instant < window.start or instant > window.end:
        return None
    return window.offset_hours(instant)
