# File: daygrid/models/calendar.py

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from .common import parse_iso_datetime

@dataclass(eq=False)
class CalendarEvent:
    """
    Represents a timed calendar event shown in the day grid.

    Events hash by identity so two events with the same fields still get
    separate tiles. ``end <= start`` is accepted; see ``is_degenerate``.
    """
    summary: str
    start: datetime
    end: datetime
    event_id: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    
    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)
    
    def is_degenerate(self) -> bool:
        """True for zero or negative length events."""
        return self.end <= self.start
    
    def collides_with(self, other: 'CalendarEvent') -> bool:
        """Half-open overlap test; touching endpoints do not collide."""
        return self.end > other.start and self.start < other.end
    
    def occurs_on(self, day: date) -> bool:
        """Check if the event starts on the given calendar date."""
        if isinstance(day, datetime):
            day = day.date()
        return self.start.date() == day
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'summary': self.summary,
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'event_id': self.event_id,
            'description': self.description,
            'color': self.color,
        }


def event_from_dict(data: dict) -> Optional[CalendarEvent]:
    """Create CalendarEvent from dictionary; None if a timestamp is unusable."""
    start = data.get('start')
    end = data.get('end')
    if not isinstance(start, datetime):
        start = parse_iso_datetime(str(start)) if start else None
    if not isinstance(end, datetime):
        end = parse_iso_datetime(str(end)) if end else None
    if start is None or end is None:
        return None

    return CalendarEvent(
        summary=str(data.get('summary', 'Untitled Event')),
        start=start,
        end=end,
        event_id=data.get('event_id') or data.get('id'),
        description=data.get('description'),
        color=data.get('color'),
    )
