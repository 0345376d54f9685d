"""Calendar event layout engine for wall-mounted family dashboards."""

from __future__ import annotations

from .core import bucket_events, layout_overlaps, round_to_next_slot
from .domain import CalendarEvent, ColumnAssignment, TimeSlot

__all__ = [
    "CalendarEvent",
    "ColumnAssignment",
    "TimeSlot",
    "bucket_events",
    "layout_overlaps",
    "round_to_next_slot",
]

