# File: daygrid/models/geometry.py
"""
Geometry records produced by the layout pass.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple
from .calendar import CalendarEvent
from .clock import ClockTime

@dataclass(frozen=True)
class DrawProperties:
    """Final pixel rectangle of one event tile."""
    top: float
    height: float
    left: float
    width: float
    start: datetime
    end: datetime
    
    @property
    def right(self) -> float:
        return self.left + self.width
    
    @property
    def bottom(self) -> float:
        return self.top + self.height
    
    def horizontal_span(self) -> Tuple[float, float]:
        """Half-open [left, right) span."""
        return self.left, self.right
    
    def collides_with(self, other: 'DrawProperties') -> bool:
        """Whether the two underlying time intervals overlap."""
        return self.end > other.start and self.start < other.end
    
    def to_dict(self) -> dict:
        return {
            'top': self.top,
            'height': self.height,
            'left': self.left,
            'width': self.width,
        }


@dataclass(frozen=True)
class PositionedTile:
    """An event paired with the rectangle it is painted in."""
    event: CalendarEvent
    rect: DrawProperties


@dataclass(frozen=True)
class TimelineLabel:
    """Position of one time label in the left-hand hours column."""
    time: datetime
    top: float
    bottom: float
    
    @property
    def clock(self) -> ClockTime:
        return ClockTime.from_datetime(self.time)
