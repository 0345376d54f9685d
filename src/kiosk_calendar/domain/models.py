from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from .enums import EventStatus


class EventRecordError(ValueError):
    """Raised when an event record is missing fields or carries unreadable values."""


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise EventRecordError(f"Invalid ISO timestamp: {value!r}") from exc
    raise EventRecordError(f"Unsupported datetime value: {value!r}")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no", ""):
            return False
        raise EventRecordError(f"Invalid boolean: {value!r}")
    return bool(value)


def _parse_status(value: Any) -> EventStatus:
    if not value:
        return EventStatus.CONFIRMED
    try:
        return EventStatus(str(value).strip().lower())
    except ValueError as exc:
        raise EventRecordError(f"Unknown event status: {value!r}") from exc


def _field(record: Dict[str, Any], camel: str, snake: str, default: Any = ...) -> Any:
    if camel in record:
        return record[camel]
    if snake in record:
        return record[snake]
    if default is ...:
        raise EventRecordError(f"Event record is missing '{camel}'")
    return default


@dataclass(slots=True)
class CalendarEvent:
    id: str
    calendar_id: str
    title: str
    start_time: datetime
    end_time: datetime
    is_all_day: bool = False
    location: Optional[str] = None
    description: Optional[str] = None
    status: EventStatus = EventStatus.CONFIRMED

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        return cls(
            id=str(_field(record, "id", "id")),
            calendar_id=str(_field(record, "calendarId", "calendar_id", "")),
            title=str(_field(record, "title", "title", "")),
            start_time=_parse_datetime(_field(record, "startTime", "start_time")),
            end_time=_parse_datetime(_field(record, "endTime", "end_time")),
            is_all_day=_parse_bool(_field(record, "isAllDay", "is_all_day", False)),
            location=_field(record, "location", "location", None),
            description=_field(record, "description", "description", None),
            status=_parse_status(_field(record, "status", "status", None)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "calendarId": self.calendar_id,
            "title": self.title,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat(),
            "isAllDay": self.is_all_day,
            "location": self.location,
            "description": self.description,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class ColumnAssignment:
    """Horizontal slot of a timed event inside its overlap cluster."""

    column: int
    total_columns: int

    @property
    def width_fraction(self) -> float:
        return 1 / self.total_columns

    @property
    def left_fraction(self) -> float:
        return self.column / self.total_columns


@dataclass(frozen=True, slots=True)
class TimeSlot:
    start_time: datetime
    end_time: datetime

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time


@dataclass(frozen=True, slots=True)
class TimeGridPlacement:
    """Vertical position of an event inside the visible hours of a day column."""

    top_hours: float
    height_hours: float
    visible_hours: float

    @property
    def top_fraction(self) -> float:
        return self.top_hours / self.visible_hours

    @property
    def height_fraction(self) -> float:
        return self.height_hours / self.visible_hours


@dataclass(frozen=True, slots=True)
class ScheduleWindow:
    """Visible stretch of a schedule column, bounded by two aware instants."""

    start: datetime
    end: datetime

    @property
    def visible_hours(self) -> float:
        return (self.end - self.start).total_seconds() / 3600

    def offset_hours(self, value: datetime) -> float:
        return (value - self.start).total_seconds() / 3600


@dataclass(frozen=True, slots=True)
class HourMark:
    hour: int
    offset_hours: float
    visible_hours: float

    @property
    def fraction(self) -> float:
        return self.offset_hours / self.visible_hours
