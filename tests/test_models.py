"""Tests for event records and derived value objects."""

from datetime import datetime, timedelta, timezone

import pytest

from kiosk_calendar.domain import CalendarEvent, EventRecordError, EventStatus, TimeSlot

pytestmark = pytest.mark.unit

RECORD = {
    "id": "evt-1",
    "calendarId": "family",
    "title": "Swim practice",
    "startTime": "2024-03-11T16:00:00Z",
    "endTime": "2024-03-11T17:00:00.000Z",
    "isAllDay": False,
    "location": "Community pool",
    "status": "tentative",
}


class TestCalendarEventRecords:
    def test_from_record_parses_camel_case_contract(self):
        event = CalendarEvent.from_record(RECORD)

        assert event.id == "evt-1"
        assert event.calendar_id == "family"
        assert event.start_time == datetime(2024, 3, 11, 16, tzinfo=timezone.utc)
        assert event.end_time - event.start_time == timedelta(hours=1)
        assert event.location == "Community pool"
        assert event.description is None
        assert event.status is EventStatus.TENTATIVE

    def test_from_record_accepts_snake_case(self):
        event = CalendarEvent.from_record(
            {
                "id": 42,
                "calendar_id": "school",
                "title": "Pickup",
                "start_time": datetime(2024, 3, 11, 15, tzinfo=timezone.utc),
                "end_time": "2024-03-11T15:15:00+00:00",
                "is_all_day": True,
            }
        )

        assert event.id == "42"
        assert event.is_all_day is True
        assert event.status is EventStatus.CONFIRMED

    def test_date_only_strings_are_midnight(self):
        record = dict(RECORD, startTime="2024-03-10", endTime="2024-03-12", isAllDay=True)

        event = CalendarEvent.from_record(record)

        assert event.start_time == datetime(2024, 3, 10)

    def test_unparseable_timestamp_raises(self):
        with pytest.raises(EventRecordError) as excinfo:
            CalendarEvent.from_record(dict(RECORD, startTime="next tuesday"))

        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_missing_start_raises(self):
        record = {key: value for key, value in RECORD.items() if key != "startTime"}

        with pytest.raises(EventRecordError, match="startTime"):
            CalendarEvent.from_record(record)

    def test_unknown_status_raises_record_error(self):
        with pytest.raises(EventRecordError, match="maybe") as excinfo:
            CalendarEvent.from_record(dict(RECORD, status="maybe"))

        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_status_is_case_insensitive(self):
        assert CalendarEvent.from_record(dict(RECORD, status="Cancelled")).status is EventStatus.CANCELLED

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("false", False), ("False", False), ("0", False), ("true", True), (1, True)],
    )
    def test_all_day_flag_strings(self, raw, expected):
        assert CalendarEvent.from_record(dict(RECORD, isAllDay=raw)).is_all_day is expected

    def test_unreadable_all_day_flag_raises(self):
        with pytest.raises(EventRecordError, match="boolean"):
            CalendarEvent.from_record(dict(RECORD, isAllDay="sometimes"))

    def test_to_record_round_trips_contract_keys(self):
        event = CalendarEvent.from_record(RECORD)

        record = event.to_record()

        assert record["calendarId"] == "family"
        assert record["startTime"] == "2024-03-11T16:00:00+00:00"
        assert record["status"] == "tentative"
        assert CalendarEvent.from_record(record) == event


class TestTimeSlot:
    def test_duration(self):
        start = datetime(2024, 3, 11, 9, 30)

        assert TimeSlot(start, start + timedelta(minutes=45)).duration == timedelta(minutes=45)
