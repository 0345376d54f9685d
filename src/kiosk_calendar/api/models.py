from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import CalendarEvent, ColumnAssignment, HourMark, TimeGridPlacement, TimeSlot
from ..services import DayLayout, ScheduleLayout, WeekLayout


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    calendar_id: str = Field(default="", alias="calendarId")
    title: str = ""
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    is_all_day: bool = Field(default=False, alias="isAllDay")
    location: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    status: str = "confirmed"

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            calendar_id=event.calendar_id,
            title=event.title,
            start_time=_iso(event.start_time),
            end_time=_iso(event.end_time),
            is_all_day=event.is_all_day,
            location=event.location,
            description=event.description,
            status=event.status.value,
        )


class ColumnPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    column: int = Field(ge=0)
    total_columns: int = Field(ge=1, alias="totalColumns")
    width_percent: float = Field(alias="widthPercent")
    left_percent: float = Field(alias="leftPercent")

    @classmethod
    def from_domain(cls, assignment: ColumnAssignment) -> "ColumnPayload":
        return cls(
            column=assignment.column,
            total_columns=assignment.total_columns,
            width_percent=assignment.width_fraction * 100,
            left_percent=assignment.left_fraction * 100,
        )


class PlacementPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    top_hours: float = Field(alias="topHours")
    height_hours: float = Field(alias="heightHours")
    top_percent: float = Field(alias="topPercent")
    height_percent: float = Field(alias="heightPercent")

    @classmethod
    def from_domain(cls, placement: TimeGridPlacement) -> "PlacementPayload":
        return cls(
            top_hours=placement.top_hours,
            height_hours=placement.height_hours,
            top_percent=placement.top_fraction * 100,
            height_percent=placement.height_fraction * 100,
        )


class DayLayoutPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    all_day: List[EventPayload] = Field(default_factory=list, alias="allDay")
    timed: List[EventPayload] = Field(default_factory=list)
    columns: Dict[str, ColumnPayload] = Field(default_factory=dict)
    placements: Dict[str, PlacementPayload] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, layout: DayLayout) -> "DayLayoutPayload":
        return cls(
            date=layout.key,
            all_day=[EventPayload.from_domain(event) for event in layout.all_day],
            timed=[EventPayload.from_domain(event) for event in layout.timed],
            columns={event_id: ColumnPayload.from_domain(item) for event_id, item in layout.columns.items()},
            placements={event_id: PlacementPayload.from_domain(item) for event_id, item in layout.placements.items()},
        )


class WeekLayoutPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    days: List[DayLayoutPayload]
    next_event_id: Optional[str] = Field(default=None, alias="nextEventId")

    @classmethod
    def from_domain(cls, layout: WeekLayout) -> "WeekLayoutPayload":
        return cls(
            days=[DayLayoutPayload.from_domain(day) for day in layout.days],
            next_event_id=layout.next_event_id,
        )


class HourMarkPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hour: int = Field(ge=0, le=23)
    offset_hours: float = Field(alias="offsetHours")
    position_percent: float = Field(alias="positionPercent")

    @classmethod
    def from_domain(cls, mark: HourMark) -> "HourMarkPayload":
        return cls(hour=mark.hour, offset_hours=mark.offset_hours, position_percent=mark.fraction * 100)


class ScheduleLayoutPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    window_start: str = Field(alias="windowStart")
    window_end: str = Field(alias="windowEnd")
    events: List[EventPayload] = Field(default_factory=list)
    columns: Dict[str, ColumnPayload] = Field(default_factory=dict)
    placements: Dict[str, PlacementPayload] = Field(default_factory=dict)
    hour_marks: List[HourMarkPayload] = Field(default_factory=list, alias="hourMarks")
    now_percent: Optional[float] = Field(default=None, alias="nowPercent")

    @classmethod
    def from_domain(cls, layout: ScheduleLayout) -> "ScheduleLayoutPayload":
        window = layout.window
        return cls(
            window_start=_iso(window.start),
            window_end=_iso(window.end),
            events=[EventPayload.from_domain(event) for event in layout.events],
            columns={event_id: ColumnPayload.from_domain(item) for event_id, item in layout.columns.items()},
            placements={event_id: PlacementPayload.from_domain(item) for event_id, item in layout.placements.items()},
            hour_marks=[HourMarkPayload.from_domain(mark) for mark in layout.hour_marks],
            now_percent=None if layout.now_offset is None else layout.now_offset / window.visible_hours * 100,
        )


class TimeSlotPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")

    @classmethod
    def from_domain(cls, slot: TimeSlot) -> "TimeSlotPayload":
        return cls(start_time=_iso(slot.start_time), end_time=_iso(slot.end_time))


def _iso(value: datetime) -> str:
    return value.isoformat()
