from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..core.config import LOG_DIR
from ..domain import TimeFormat, WeekMode

load_dotenv()


@dataclass(frozen=True)
class CalendarSettings:
    timezone: str
    week_starts_on: int
    week_mode: WeekMode
    day_start_hour: int
    day_end_hour: int
    default_event_minutes: int
    min_event_hours: float
    time_format: TimeFormat
    rolling_offset_minutes: int
    rolling_duration_hours: int

    @property
    def visible_hours(self) -> int:
        return self.day_end_hour - self.day_start_hour


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class AppSettings:
    calendar: CalendarSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    if maximum is not None and value > maximum:
        return default
    return value


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _enum_from_env(name: str, enum_type, default):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    day_start = _int_from_env("KIOSK_DAY_START_HOUR", 6, minimum=0, maximum=23)
    day_end = _int_from_env("KIOSK_DAY_END_HOUR", 22, minimum=1, maximum=24)
    if day_end <= day_start:
        day_start, day_end = 6, 22

    calendar = CalendarSettings(
        timezone=os.getenv("KIOSK_TIMEZONE", "UTC"),
        week_starts_on=_int_from_env("KIOSK_WEEK_STARTS_ON", 1, minimum=0, maximum=6),
        week_mode=_enum_from_env("KIOSK_WEEK_MODE", WeekMode, WeekMode.CURRENT),
        day_start_hour=day_start,
        day_end_hour=day_end,
        default_event_minutes=_int_from_env("KIOSK_DEFAULT_EVENT_MINUTES", 60, minimum=0),
        min_event_hours=_float_from_env("KIOSK_MIN_EVENT_HOURS", 0.5),
        time_format=_enum_from_env("KIOSK_TIME_FORMAT", TimeFormat, TimeFormat.TWELVE_HOUR),
        rolling_offset_minutes=_int_from_env("KIOSK_ROLLING_OFFSET_MINUTES", 60, minimum=0),
        rolling_duration_hours=_int_from_env("KIOSK_ROLLING_DURATION_HOURS", 8, minimum=1, maximum=24),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("KIOSK_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("KIOSK_LOG_DIR") or LOG_DIR),
    )

    return AppSettings(calendar=calendar, logging=logging_settings)
