from .enums import MinuteSlotSize
from .common import parse_iso_datetime
from .clock import ClockTime
from .calendar import CalendarEvent, event_from_dict
from .geometry import DrawProperties, PositionedTile, TimelineLabel
from .config import ViewConfig

__all__ = [
    "MinuteSlotSize",
    "parse_iso_datetime",
    "ClockTime",
    "CalendarEvent",
    "event_from_dict",
    "DrawProperties",
    "PositionedTile",
    "TimelineLabel",
    "ViewConfig",
]
