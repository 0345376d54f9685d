from __future__ import annotations

import logging
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import AppSettings, get_settings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LayoutContext:
    """Settings plus the resolved viewer timezone shared by layout services."""

    settings: AppSettings = field(default_factory=get_settings)
    timezone: ZoneInfo = field(init=False)

    def __post_init__(self) -> None:
        name = self.settings.calendar.timezone
        try:
            self.timezone = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, falling back to UTC", name)
            self.timezone = ZoneInfo("UTC")
