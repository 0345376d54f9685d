from datetime import datetime, timezone
from typing import Callable, Iterator
from zoneinfo import ZoneInfo

import pytest

from kiosk_calendar.config import get_settings
from kiosk_calendar.domain import CalendarEvent


@pytest.fixture
def local_tz() -> ZoneInfo:
    """Deterministic viewer timezone west of UTC.

    A zone behind UTC makes midnight-UTC all-day events fall on the previous
    local evening, which is exactly the shift the engine has to undo.
    """
    return ZoneInfo("America/Los_Angeles")


@pytest.fixture
def make_event() -> Callable[..., CalendarEvent]:
    """Factory for events; naive start/end values are treated as UTC."""

    counter = {"next": 0}

    def _make(
        start: datetime,
        end: datetime,
        *,
        event_id: str | None = None,
        all_day: bool = False,
        title: str | None = None,
    ) -> CalendarEvent:
        counter["next"] += 1
        identifier = event_id or f"evt-{counter['next']}"
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone.utc)
        return CalendarEvent(
            id=identifier,
            calendar_id="family",
            title=title or identifier,
            start_time=start,
            end_time=end,
            is_all_day=all_day,
        )

    return _make


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[Callable[..., object]]:
    """Apply KIOSK_* environment overrides and rebuild the cached settings."""

    monkeypatch.setenv("KIOSK_LOG_DIR", str(tmp_path / "logs"))

    def _apply(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _apply
    get_settings.cache_clear()
