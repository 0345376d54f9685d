"""Tests for snapping new-event times to the next half hour."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from kiosk_calendar.core import round_to_next_slot

pytestmark = pytest.mark.unit


class TestRoundToNextSlot:
    @pytest.mark.parametrize(
        ("now", "duration", "expected_start", "expected_end"),
        [
            (datetime(2024, 5, 6, 10, 0, 0), 60, datetime(2024, 5, 6, 10, 0), datetime(2024, 5, 6, 11, 0)),
            (datetime(2024, 5, 6, 10, 5, 0), 30, datetime(2024, 5, 6, 10, 30), datetime(2024, 5, 6, 11, 0)),
            (datetime(2024, 5, 6, 10, 31, 0), 60, datetime(2024, 5, 6, 11, 0), datetime(2024, 5, 6, 12, 0)),
            (datetime(2024, 5, 6, 23, 45, 0), 60, datetime(2024, 5, 7, 0, 0), datetime(2024, 5, 7, 1, 0)),
            (datetime(2024, 5, 6, 10, 30, 0), 15, datetime(2024, 5, 6, 10, 30), datetime(2024, 5, 6, 10, 45)),
        ],
    )
    def test_boundary_cases(self, now, duration, expected_start, expected_end):
        slot = round_to_next_slot(now, duration)

        assert slot.start_time == expected_start
        assert slot.end_time == expected_end

    def test_default_duration_is_one_hour(self):
        slot = round_to_next_slot(datetime(2024, 5, 6, 14, 10))

        assert slot.duration == timedelta(hours=1)

    def test_seconds_and_microseconds_are_zeroed(self):
        slot = round_to_next_slot(datetime(2024, 5, 6, 10, 0, 59, 123456))

        assert slot.start_time == datetime(2024, 5, 6, 10, 0)

    def test_half_past_with_seconds_stays_on_half_hour(self):
        slot = round_to_next_slot(datetime(2024, 5, 6, 10, 30, 45))

        assert slot.start_time == datetime(2024, 5, 6, 10, 30)

    def test_rollover_crosses_year_boundary(self):
        slot = round_to_next_slot(datetime(2024, 12, 31, 23, 59, 30))

        assert slot.start_time == datetime(2025, 1, 1, 0, 0)
        assert slot.end_time == datetime(2025, 1, 1, 1, 0)

    def test_rollover_crosses_leap_day(self):
        slot = round_to_next_slot(datetime(2024, 2, 28, 23, 40), 90)

        assert slot.start_time == datetime(2024, 2, 29, 0, 0)
        assert slot.end_time == datetime(2024, 2, 29, 1, 30)

    def test_timezone_is_preserved(self):
        berlin = ZoneInfo("Europe/Berlin")
        slot = round_to_next_slot(datetime(2024, 5, 6, 8, 12, tzinfo=berlin))

        assert slot.start_time == datetime(2024, 5, 6, 8, 30, tzinfo=berlin)
        assert slot.start_time.tzinfo is berlin

    def test_aware_utc_input(self):
        slot = round_to_next_slot(datetime(2024, 5, 6, 23, 50, tzinfo=timezone.utc), 30)

        assert slot.start_time == datetime(2024, 5, 7, 0, 0, tzinfo=timezone.utc)
        assert slot.end_time == datetime(2024, 5, 7, 0, 30, tzinfo=timezone.utc)

    def test_zero_duration(self):
        slot = round_to_next_slot(datetime(2024, 5, 6, 9, 15), 0)

        assert slot.start_time == slot.end_time == datetime(2024, 5, 6, 9, 30)
