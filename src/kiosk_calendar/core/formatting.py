from __future__ import annotations

from datetime import datetime

from ..domain import TimeFormat


def format_time_label(value: datetime, time_format: TimeFormat = TimeFormat.TWELVE_HOUR) -> str:
    time_format = TimeFormat(time_format)
    if time_format is TimeFormat.TWENTY_FOUR_HOUR:
        return f"{value.hour:02d}:{value.minute:02d}"
    if time_format is TimeFormat.TWENTY_FOUR_HOUR_SECONDS:
        return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"

    suffix = "PM" if value.hour >= 12 else "AM"
    hour = value.hour % 12 or 12
    if time_format is TimeFormat.TWELVE_HOUR_SECONDS:
        return f"{hour}:{value.minute:02d}:{value.second:02d} {suffix}"
    # Top-of-hour labels drop the minutes.
    if value.minute == 0:
        return f"{hour} {suffix}"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start: datetime, end: datetime, time_format: TimeFormat = TimeFormat.TWELVE_HOUR) -> str:
    return f"{format_time_label(start, time_format)} - {format_time_label(end, time_format)}"
