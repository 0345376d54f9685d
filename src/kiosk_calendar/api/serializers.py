from __future__ import annotations

from typing import Any, Dict

from ..domain import CalendarEvent, TimeSlot
from ..services import DayLayout, ScheduleLayout, WeekLayout
from .models import DayLayoutPayload, EventPayload, ScheduleLayoutPayload, TimeSlotPayload, WeekLayoutPayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_day_layout(layout: DayLayout) -> Dict[str, Any]:
    return DayLayoutPayload.from_domain(layout).model_dump(by_alias=True)


def serialize_week_layout(layout: WeekLayout) -> Dict[str, Any]:
    return WeekLayoutPayload.from_domain(layout).model_dump(by_alias=True)


def serialize_time_slot(slot: TimeSlot) -> Dict[str, Any]:
    return TimeSlotPayload.from_domain(slot).model_dump(by_alias=True)


def serialize_schedule_layout(layout: ScheduleLayout) -> Dict[str, Any]:
    return ScheduleLayoutPayload.from_domain(layout).model_dump(by_alias=True)
