"""Tests for vertical placement of events on the day time grid."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from kiosk_calendar.core import (
    fixed_window,
    hour_marks,
    now_line_offset,
    place_in_window,
    place_on_time_grid,
    rolling_window,
)
from kiosk_calendar.domain import ScheduleWindow, TimeGridPlacement

pytestmark = pytest.mark.unit

UTC = timezone.utc
DAY = date(2024, 3, 11)


def _at(hour: int, minute: int = 0, day: int = 11) -> datetime:
    return datetime(2024, 3, day, hour, minute, tzinfo=UTC)


class TestPlaceOnTimeGrid:
    def test_event_inside_visible_hours(self, make_event):
        event = make_event(_at(9), _at(10, 30))

        placement = place_on_time_grid(event, DAY, tz=UTC)

        assert placement == TimeGridPlacement(top_hours=3, height_hours=1.5, visible_hours=16)
        assert placement.top_fraction == pytest.approx(3 / 16)
        assert placement.height_fraction == pytest.approx(1.5 / 16)

    def test_event_clamped_at_day_start(self, make_event):
        placement = place_on_time_grid(make_event(_at(5), _at(7)), DAY, tz=UTC)

        assert placement.top_hours == 0
        assert placement.height_hours == 1

    def test_event_clamped_at_day_end(self, make_event):
        placement = place_on_time_grid(make_event(_at(21), _at(23, 30)), DAY, tz=UTC)

        assert placement.top_hours == 15
        assert placement.height_hours == 1

    @pytest.mark.parametrize(("start", "end"), [((23, 0), (23, 30)), ((4, 0), (5, 0)), ((5, 0), (6, 0))])
    def test_events_outside_visible_hours_are_not_placed(self, make_event, start, end):
        assert place_on_time_grid(make_event(_at(*start), _at(*end)), DAY, tz=UTC) is None

    def test_short_event_gets_minimum_height(self, make_event):
        placement = place_on_time_grid(make_event(_at(9), _at(9, 10)), DAY, tz=UTC)

        assert placement.height_hours == 0.5

    def test_degenerate_event_gets_minimum_height(self, make_event):
        placement = place_on_time_grid(make_event(_at(10), _at(9)), DAY, tz=UTC)

        assert placement.top_hours == 4
        assert placement.height_hours == 0.5

    def test_custom_window_and_minimum(self, make_event):
        placement = place_on_time_grid(
            make_event(_at(8), _at(8, 15)),
            DAY,
            day_start_hour=8,
            day_end_hour=18,
            min_height_hours=0.25,
            tz=UTC,
        )

        assert placement == TimeGridPlacement(top_hours=0, height_hours=0.25, visible_hours=10)


class TestMultiDayPlacement:
    def test_event_from_previous_evening(self, make_event):
        placement = place_on_time_grid(make_event(_at(20, day=10), _at(8)), DAY, tz=UTC)

        assert placement.top_hours == 0
        assert placement.height_hours == 2

    def test_event_running_past_midnight(self, make_event):
        placement = place_on_time_grid(make_event(_at(20), _at(2, day=12)), DAY, tz=UTC)

        assert placement.top_hours == 14
        assert placement.height_hours == 2


class TestPlacementTimezone:
    def test_hours_follow_viewer_zone(self, make_event, local_tz):
        """14:00Z on March 11 is 07:00 daylight time in Los Angeles."""
        placement = place_on_time_grid(make_event(_at(14), _at(15)), DAY, tz=local_tz)

        assert placement.top_hours == 1
        assert placement.height_hours == 1

    def test_rejects_inverted_window(self, make_event):
        with pytest.raises(ValueError):
            place_on_time_grid(make_event(_at(9), _at(10)), DAY, day_start_hour=20, day_end_hour=8)


class TestRollingWindow:
    """A window that opens an hour before now and runs eight hours, across midnight."""

    @pytest.fixture
    def window(self) -> ScheduleWindow:
        return rolling_window(_at(22, 30), offset_minutes=60, duration_hours=8, tz=UTC)

    def test_window_bounds(self, window):
        assert window.start == _at(21, 30)
        assert window.end == _at(5, 30, day=12)
        assert window.visible_hours == 8

    def test_event_crossing_midnight(self, make_event, window):
        placement = place_in_window(make_event(_at(23), _at(1, day=12)), window, tz=UTC)

        assert placement == TimeGridPlacement(top_hours=1.5, height_hours=2, visible_hours=8)

    def test_event_clamped_at_window_end(self, make_event, window):
        placement = place_in_window(make_event(_at(4, day=12), _at(7, day=12)), window, tz=UTC)

        assert placement.top_hours == 6.5
        assert placement.height_hours == 1.5

    def test_event_before_window_is_not_placed(self, make_event, window):
        assert place_in_window(make_event(_at(20), _at(21)), window, tz=UTC) is None

    def test_degenerate_event_gets_minimum_height(self, make_event, window):
        placement = place_in_window(make_event(_at(23), _at(22, 45)), window, min_height_hours=0.25, tz=UTC)

        assert placement.top_hours == 1.5
        assert placement.height_hours == 0.25

    def test_naive_now_uses_viewer_zone(self, local_tz):
        window = rolling_window(datetime(2024, 3, 11, 9, 0), offset_minutes=30, duration_hours=2, tz=local_tz)

        assert window.start == datetime(2024, 3, 11, 15, 30, tzinfo=UTC)

    def test_rejects_empty_duration(self):
        with pytest.raises(ValueError):
            rolling_window(_at(9), duration_hours=0, tz=UTC)


class TestHourMarks:
    def test_rolling_marks_wrap_past_midnight(self):
        window = rolling_window(_at(22, 30), offset_minutes=60, duration_hours=8, tz=UTC)

        marks = hour_marks(window, UTC)

        assert [mark.hour for mark in marks] == [22, 23, 0, 1, 2, 3, 4, 5]
        assert [mark.offset_hours for mark in marks] == [0.5, 1.5, 2.5, 3.5, 4.5, 5.5, 6.5, 7.5]
        assert marks[0].fraction == pytest.approx(0.5 / 8)

    def test_fixed_window_marks_every_hour_including_both_edges(self):
        marks = hour_marks(fixed_window(DAY, 6, 22, UTC), UTC)

        assert [mark.hour for mark in marks] == list(range(6, 23))
        assert marks[0].fraction == 0
        assert marks[-1].fraction == 1

    def test_marks_follow_local_clock_through_fall_back(self):
        new_york = ZoneInfo("America/New_York")
        # 00:30 EDT to 03:30 EST is four real hours.
        window = ScheduleWindow(
            start=datetime(2024, 11, 3, 4, 30, tzinfo=UTC),
            end=datetime(2024, 11, 3, 8, 30, tzinfo=UTC),
        )

        marks = hour_marks(window, new_york)

        assert [mark.hour for mark in marks] == [1, 2, 3]
        assert [mark.offset_hours for mark in marks] == [0.5, 2.5, 3.5]


class TestNowLine:
    def test_offset_inside_window(self):
        window = fixed_window(DAY, 6, 22, UTC)

        assert now_line_offset(_at(9, 15), window, UTC) == 3.25

    @pytest.mark.parametrize("now", [_at(5, 59), _at(22, 1)])
    def test_hidden_outside_visible_hours(self, now):
        assert now_line_offset(now, fixed_window(DAY, 6, 22, UTC), UTC) is None

    def test_fixed_window_follows_viewer_zone(self, local_tz):
        window = fixed_window(DAY, 6, 22, local_tz)

        assert window.start == _at(13)
        assert window.visible_hours == 16
