"""Domain models for calendar layout."""

from __future__ import annotations

from .models import (
    CalendarEvent,
    ColumnAssignment,
    EventRecordError,
    HourMark,
    ScheduleWindow,
    TimeGridPlacement,
    TimeSlot,
)
from .enums import EventStatus, TimeFormat, WeekMode

__all__ = [
    "CalendarEvent",
    "ColumnAssignment",
    "EventRecordError",
    "EventStatus",
    "HourMark",
    "ScheduleWindow",
    "TimeFormat",
    "TimeGridPlacement",
    "TimeSlot",
    "WeekMode",
]
