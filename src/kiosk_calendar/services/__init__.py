"""Application services combining settings with the layout engine."""

from __future__ import annotations

from .context import LayoutContext
from .layout import CalendarLayoutService, DayLayout, ScheduleLayout, WeekLayout

__all__ = ["CalendarLayoutService", "DayLayout", "LayoutContext", "ScheduleLayout", "WeekLayout"]
