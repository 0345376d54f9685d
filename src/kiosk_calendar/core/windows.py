from __future__ import annotations

from datetime import date, timedelta, tzinfo
from typing import Iterable, List, Optional, Tuple

from ..domain import CalendarEvent, WeekMode
from .timeline import as_day, day_bounds, effective_span, effective_start, overlaps_range


def _check_week_start(week_starts_on: int) -> None:
    if not 0 <= week_starts_on <= 6:
        raise ValueError("week_starts_on must be between 0 (Sunday) and 6 (Saturday)")


def _date_range(start: date, count: int) -> List[date]:
    return [start + timedelta(days=index) for index in range(count)]


def start_of_week(day: date, week_starts_on: int = 1) -> date:
    """Return the first day of the week containing ``day``.

    ``week_starts_on`` counts from Sunday: 0 is Sunday, 1 is Monday.
    """

    _check_week_start(week_starts_on)
    target = as_day(day)
    sunday_based = (target.weekday() + 1) % 7
    return target - timedelta(days=(sunday_based - week_starts_on) % 7)


def week_days(
    anchor: date,
    mode: WeekMode = WeekMode.CURRENT,
    week_starts_on: int = 1,
    count: int = 7,
) -> List[date]:
    if count < 0:
        raise ValueError("count must not be negative")
    if WeekMode(mode) is WeekMode.ROLLING:
        _check_week_start(week_starts_on)
        start = as_day(anchor)
    else:
        start = start_of_week(anchor, week_starts_on)
    return _date_range(start, count)


def next_week_range(
    anchor: date,
    mode: WeekMode = WeekMode.CURRENT,
    week_starts_on: int = 1,
) -> Tuple[date, date]:
    first = week_days(anchor, mode, week_starts_on, count=1)[0] + timedelta(days=7)
    return first, first + timedelta(days=6)


def month_grid(anchor: date, week_starts_on: int = 1, weeks: int = 4) -> List[List[date]]:
    """Rows of seven days starting with the week that contains ``anchor``."""

    if weeks < 0:
        raise ValueError("weeks must not be negative")
    days = _date_range(start_of_week(anchor, week_starts_on), weeks * 7)
    return [days[row * 7 : row * 7 + 7] for row in range(weeks)]


def events_in_range(
    events: Iterable[CalendarEvent],
    first: date,
    last: date,
    tz: Optional[tzinfo] = None,
) -> List[CalendarEvent]:
    range_start, _ = day_bounds(first, tz)
    _, range_end = day_bounds(last, tz)
    selected = [event for event in events if overlaps_range(effective_span(event, tz), range_start, range_end)]
    return sorted(selected, key=lambda event: effective_start(event, tz))
