"""DayGrid: event tile layout for calendar day and week views."""

from daygrid.core import LayoutEngine, layout
from daygrid.models import CalendarEvent, ClockTime, DrawProperties, MinuteSlotSize, ViewConfig
from daygrid.processors.day_view import DayView

__version__ = "0.1.0"

__all__ = [
    "LayoutEngine",
    "layout",
    "CalendarEvent",
    "ClockTime",
    "DrawProperties",
    "MinuteSlotSize",
    "ViewConfig",
    "DayView",
]
