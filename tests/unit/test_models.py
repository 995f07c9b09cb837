# File: tests/unit/test_models.py
"""
Unit tests for data models.
"""

import pytest
from datetime import date, datetime

from daygrid.models import (
    CalendarEvent, DrawProperties, MinuteSlotSize, ViewConfig, event_from_dict, parse_iso_datetime
)


# ==================== CalendarEvent Tests ====================

class TestCalendarEvent:
    """Tests for CalendarEvent dataclass."""

    def test_event_creation(self):
        start = datetime(2025, 11, 18, 10, 0)
        end = datetime(2025, 11, 18, 11, 0)

        event = CalendarEvent(summary="Meeting", start=start, end=end, event_id="e1")

        assert event.summary == "Meeting"
        assert event.duration_minutes() == 60
        assert event.is_degenerate() is False

    def test_inverted_event_is_accepted(self):
        event = CalendarEvent("Backwards", datetime(2025, 11, 18, 11), datetime(2025, 11, 18, 10))

        assert event.is_degenerate() is True
        assert event.duration_minutes() == -60

    def test_zero_length_event_is_degenerate(self, make_event):
        assert make_event("09:00", "09:00").is_degenerate() is True

    def test_collides_with(self, make_event):
        a = make_event("09:00", "10:00")

        assert a.collides_with(make_event("09:59", "11:00"))
        assert not a.collides_with(make_event("10:00", "11:00"))
        assert not a.collides_with(make_event("08:00", "09:00"))

    def test_occurs_on(self, calendar_event, day):
        assert calendar_event.occurs_on(day)
        assert calendar_event.occurs_on(datetime(day.year, day.month, day.day, 23, 0))
        assert not calendar_event.occurs_on(date(2025, 11, 19))

    def test_hashes_by_identity(self, make_event):
        a = make_event("09:00", "10:00", "Same")
        b = make_event("09:00", "10:00", "Same")

        assert a != b
        assert len({a, b}) == 2

    def test_event_to_dict(self, calendar_event):
        result = calendar_event.to_dict()

        assert result['summary'] == "Team Meeting"
        assert result['start'] == "2025-11-18T09:00:00"
        assert result['end'] == "2025-11-18T10:00:00"

    def test_event_from_dict(self):
        event = event_from_dict({
            'id': 'abc',
            'summary': 'Standup',
            'start': '2025-11-18T09:00:00Z',
            'end': '2025-11-18T09:15:00Z',
            'color': '#ff0000',
        })

        assert event.event_id == 'abc'
        assert event.duration_minutes() == 15
        assert event.start.tzinfo is not None
        assert event.color == '#ff0000'

    def test_event_from_dict_accepts_datetimes(self):
        start = datetime(2025, 11, 18, 9)
        event = event_from_dict({'start': start, 'end': datetime(2025, 11, 18, 10)})

        assert event.start is start
        assert event.summary == 'Untitled Event'

    @pytest.mark.parametrize("record", [
        {'start': 'not a date', 'end': '2025-11-18T10:00:00'},
        {'start': '2025-11-18T09:00:00'},
        {},
    ])
    def test_event_from_dict_unusable_timestamps(self, record):
        assert event_from_dict(record) is None

    def test_parse_iso_date_only(self):
        assert parse_iso_datetime("2025-11-18") == datetime(2025, 11, 18)


# ==================== MinuteSlotSize Tests ====================

class TestMinuteSlotSize:
    """Tests for MinuteSlotSize enum."""

    def test_minutes(self):
        assert [s.minutes for s in MinuteSlotSize] == [5, 15, 30, 60]

    @pytest.mark.parametrize("raw, expected", [
        (15, MinuteSlotSize.MINUTES_15),
        ("5", MinuteSlotSize.MINUTES_5),
        (MinuteSlotSize.MINUTES_30, MinuteSlotSize.MINUTES_30),
        (7, MinuteSlotSize.MINUTES_60),
        ("hourly", MinuteSlotSize.MINUTES_60),
        (None, MinuteSlotSize.MINUTES_60),
    ])
    def test_from_minutes(self, raw, expected):
        assert MinuteSlotSize.from_minutes(raw) is expected


# ==================== ViewConfig Tests ====================

class TestViewConfig:
    """Tests for ViewConfig dataclass."""

    def test_defaults(self):
        config = ViewConfig()

        assert config.slot_minutes == 60
        assert config.hour_height == pytest.approx(42.0)

    def test_from_dict(self):
        config = ViewConfig.from_dict({
            'height_per_minute': 2,
            'hours_column_width': 64,
            'slot_minutes': 15,
            'timezone': 'Europe/Amsterdam',
        })

        assert config.height_per_minute == 2.0
        assert config.hours_column_width == 64.0
        assert config.minute_slot_size is MinuteSlotSize.MINUTES_15
        assert config.timezone == 'Europe/Amsterdam'

    def test_invalid_values_fall_back(self):
        config = ViewConfig.from_dict({
            'height_per_minute': 'tall',
            'hours_column_width': -10,
            'slot_minutes': 42,
        })

        assert config.height_per_minute == 0.7
        assert config.hours_column_width == 0.0
        assert config.minute_slot_size is MinuteSlotSize.MINUTES_60

    def test_unknown_timezone_falls_back_to_utc(self):
        assert ViewConfig(timezone='Mars/Olympus').timezone == 'UTC'
        assert ViewConfig.from_dict({'timezone': 'Asia/Tokyo'}).timezone == 'Asia/Tokyo'

    def test_to_dict_round_trips(self):
        config = ViewConfig(height_per_minute=1.5, minute_slot_size=30, timeline_offset=4)

        assert ViewConfig.from_dict(config.to_dict()) == config


# ==================== DrawProperties Tests ====================

class TestDrawProperties:
    """Tests for DrawProperties dataclass."""

    def test_edges(self):
        rect = DrawProperties(top=10.0, height=20.0, left=5.0, width=50.0,
                              start=datetime(2025, 11, 18, 9), end=datetime(2025, 11, 18, 10))

        assert rect.right == 55.0
        assert rect.bottom == 30.0
        assert rect.horizontal_span() == (5.0, 55.0)
        assert rect.to_dict() == {'top': 10.0, 'height': 20.0, 'left': 5.0, 'width': 50.0}

    def test_is_frozen(self):
        rect = DrawProperties(0.0, 0.0, 0.0, 0.0, datetime(2025, 11, 18), datetime(2025, 11, 18))

        with pytest.raises(AttributeError):
            rect.width = 10.0
