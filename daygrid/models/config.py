# File: daygrid/models/config.py
"""
Data models for DayGrid view configuration.
"""

from dataclasses import dataclass
import pytz

from .enums import MinuteSlotSize

def _non_negative(value, default: float) -> float:
    try:
        return max(float(value), 0.0)
    except (TypeError, ValueError):
        return default


@dataclass
class ViewConfig:
    """Geometry settings shared by the layout engine and the day view."""
    height_per_minute: float = 0.7
    hours_column_width: float = 50.0
    minute_slot_size: MinuteSlotSize = MinuteSlotSize.MINUTES_60
    timeline_offset: float = 0.0
    live_indicator_offset: float = 0.0
    timezone: str = "UTC"
    
    def __post_init__(self):
        """Coerce loose values; anything invalid falls back to a default."""
        self.minute_slot_size = MinuteSlotSize.from_minutes(self.minute_slot_size)
        self.height_per_minute = _non_negative(self.height_per_minute, 0.7)
        self.hours_column_width = _non_negative(self.hours_column_width, 50.0)
        self.timeline_offset = _non_negative(self.timeline_offset, 0.0)
        self.live_indicator_offset = _non_negative(self.live_indicator_offset, 0.0)
        if self.timezone not in pytz.all_timezones_set:
            self.timezone = "UTC"
    
    @property
    def slot_minutes(self) -> int:
        return self.minute_slot_size.minutes
    
    @property
    def hour_height(self) -> float:
        return self.height_per_minute * 60
    
    @classmethod
    def from_dict(cls, data: dict) -> 'ViewConfig':
        """Create ViewConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            height_per_minute=data.get('height_per_minute', 0.7),
            hours_column_width=data.get('hours_column_width', 50.0),
            minute_slot_size=data.get('slot_minutes', 60),
            timeline_offset=data.get('timeline_offset', 0.0),
            live_indicator_offset=data.get('live_indicator_offset', 0.0),
            timezone=data.get('timezone', 'UTC'),
        )
    
    def to_dict(self) -> dict:
        return {
            'height_per_minute': self.height_per_minute,
            'hours_column_width': self.hours_column_width,
            'slot_minutes': self.slot_minutes,
            'timeline_offset': self.timeline_offset,
            'live_indicator_offset': self.live_indicator_offset,
            'timezone': self.timezone,
        }
