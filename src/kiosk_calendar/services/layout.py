from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from ..core import (
    bucket_events,
    day_key,
    effective_start,
    events_in_range,
    hour_marks,
    layout_overlaps,
    next_upcoming_event,
    next_week_range,
    now_line_offset,
    place_in_window,
    place_on_time_grid,
    rolling_window,
    round_to_next_slot,
    split_all_day,
    week_days,
)
from ..domain import CalendarEvent, ColumnAssignment, HourMark, ScheduleWindow, TimeGridPlacement, TimeSlot
from .context import LayoutContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DayLayout:
    day: date
    all_day: List[CalendarEvent] = field(default_factory=list)
    timed: List[CalendarEvent] = field(default_factory=list)
    columns: Dict[str, ColumnAssignment] = field(default_factory=dict)
    placements: Dict[str, TimeGridPlacement] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return day_key(self.day)

    @property
    def events(self) -> List[CalendarEvent]:
        return self.all_day + self.timed


@dataclass(slots=True)
class WeekLayout:
    days: List[DayLayout]
    next_event_id: Optional[str] = None

    def day(self, key: str) -> Optional[DayLayout]:
        for day_layout in self.days:
            if day_layout.key == key:
                return day_layout
        return None


@dataclass(slots=True)
class ScheduleLayout:
    """Timed events laid out in a window that follows the clock."""

    window: ScheduleWindow
    events: List[CalendarEvent] = field(default_factory=list)
    columns: Dict[str, ColumnAssignment] = field(default_factory=dict)
    placements: Dict[str, TimeGridPlacement] = field(default_factory=dict)
    hour_marks: List[HourMark] = field(default_factory=list)
    now_offset: Optional[float] = None


@dataclass(slots=True)
class CalendarLayoutService:
    context: LayoutContext = field(default_factory=LayoutContext)

    def now(self) -> datetime:
        return datetime.now(self.context.timezone)

    def week_days(self, anchor: date) -> List[date]:
        calendar = self.context.settings.calendar
        return week_days(anchor, calendar.week_mode, calendar.week_starts_on)

    def layout_days(self, events: Iterable[CalendarEvent], days: List[date]) -> List[DayLayout]:
        """Bucket ``events`` over ``days`` and lay out the timed events of each day."""

        tz = self.context.timezone
        calendar = self.context.settings.calendar
        buckets = bucket_events(list(events), days, tz)

        layouts: list[DayLayout] = []
        for day in days:
            all_day, timed = split_all_day(buckets.get(day_key(day), []))
            placements: dict[str, TimeGridPlacement] = {}
            for event in timed:
                placement = place_on_time_grid(
                    event,
                    day,
                    day_start_hour=calendar.day_start_hour,
                    day_end_hour=calendar.day_end_hour,
                    min_height_hours=calendar.min_event_hours,
                    tz=tz,
                )
                if placement is not None:
                    placements[event.id] = placement
            layouts.append(
                DayLayout(
                    day=day,
                    all_day=all_day,
                    timed=timed,
                    columns=layout_overlaps(timed, tz),
                    placements=placements,
                )
            )
        logger.debug("Laid out %d day(s) starting %s", len(layouts), days[0] if days else None)
        return layouts

    def layout_day(self, events: Iterable[CalendarEvent], day: date) -> DayLayout:
        return self.layout_days(events, [day])[0]

    def layout_week(
        self,
        events: Iterable[CalendarEvent],
        anchor: date,
        *,
        now: Optional[datetime] = None,
    ) -> WeekLayout:
        event_list = list(events)
        days = self.week_days(anchor)
        layouts = self.layout_days(event_list, days)
        buckets = {layout.key: layout.events for layout in layouts}
        upcoming = next_upcoming_event(buckets, now or self.now(), self.context.timezone)
        return WeekLayout(days=layouts, next_event_id=upcoming.id if upcoming else None)

    def next_week_events(self, events: Iterable[CalendarEvent], anchor: date) -> List[CalendarEvent]:
        calendar = self.context.settings.calendar
        first, last = next_week_range(anchor, calendar.week_mode, calendar.week_starts_on)
        return events_in_range(events, first, last, self.context.timezone)

    def default_event_times(
        self,
        now: Optional[datetime] = None,
        duration_minutes: Optional[int] = None,
    ) -> TimeSlot:
        duration = self.context.settings.calendar.default_event_minutes if duration_minutes is None else duration_minutes
        slot = round_to_next_slot(now or self.now(), duration)
        logger.debug("Default event slot %s - %s", slot.start_time.isoformat(), slot.end_time.isoformat())
        return slot

    def rolling_schedule(self, events: Iterable[CalendarEvent], now: Optional[datetime] = None) -> ScheduleLayout:
        """Lay out timed events inside the rolling window around ``now``."""

        tz = self.context.timezone
        calendar = self.context.settings.calendar
        current = now or self.now()
        window = rolling_window(current, calendar.rolling_offset_minutes, calendar.rolling_duration_hours, tz)

        visible: list[CalendarEvent] = []
        placements: dict[str, TimeGridPlacement] = {}
        for event in events:
            if event.is_all_day:
                continue
            placement = place_in_window(event, window, min_height_hours=calendar.min_event_hours, tz=tz)
            if placement is not None:
                visible.append(event)
                placements[event.id] = placement
        visible.sort(key=lambda event: effective_start(event, tz))

        logger.debug("Rolling schedule %s - %s holds %d event(s)", window.start, window.end, len(visible))
        return ScheduleLayout(
            window=window,
            events=visible,
            columns=layout_overlaps(visible, tz),
            placements=placements,
            hour_marks=hour_marks(window, tz),
            now_offset=now_line_offset(current, window, tz),
        )
