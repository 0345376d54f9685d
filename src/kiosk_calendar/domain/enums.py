from __future__ import annotations

from enum import Enum


class EventStatus(str, Enum):
    CONFIRMED = "confirmed"
    TENTATIVE = "tentative"
    CANCELLED = "cancelled"


class WeekMode(str, Enum):
    CURRENT = "current"
    ROLLING = "rolling"


class TimeFormat(str, Enum):
    TWELVE_HOUR = "12h"
    TWELVE_HOUR_SECONDS = "12h-seconds"
    TWENTY_FOUR_HOUR = "24h"
    TWENTY_FOUR_HOUR_SECONDS = "24h-seconds"
