# File: daygrid/models/clock.py
"""
Bounded hour/minute value used to turn event instants into pixel offsets.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

import pytz

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{1,2})\s*$")


@dataclass(frozen=True)
class ClockTime:
    """
    Immutable time of day.

    The public constructor clamps into 00:00..23:59. ``add`` and
    ``from_duration`` build values without that bound so they can carry
    elapsed durations longer than a day; ``MAX`` (24:00) is the only
    bounded value with hour 24.
    """
    hour: int = 0
    minute: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'hour', min(max(int(self.hour), 0), 23))
        object.__setattr__(self, 'minute', min(max(int(self.minute), 0), 59))

    @classmethod
    def _internal(cls, hour: int, minute: int) -> 'ClockTime':
        """Create an instance without clamping."""
        instance = object.__new__(cls)
        object.__setattr__(instance, 'hour', hour)
        object.__setattr__(instance, 'minute', minute)
        return instance

    # ==================== Factories ====================

    @classmethod
    def from_datetime(cls, value: datetime) -> 'ClockTime':
        """Take the hour and minute of an instant, ignoring date and seconds."""
        return cls._internal(value.hour, value.minute)

    @classmethod
    def from_duration(cls, duration: timedelta) -> 'ClockTime':
        """
        Fold a duration into hours and minutes.

        Partial minutes are truncated toward zero. Negative durations are
        not folded and come back as a negative minute count.
        """
        hour = 0
        minute = int(duration.total_seconds() / 60)
        while minute >= 60:
            hour += 1
            minute -= 60
        return cls._internal(hour, minute)

    @classmethod
    def now(cls, timezone: Optional[str] = None) -> 'ClockTime':
        """Current wall-clock time, in ``timezone`` if given."""
        if timezone:
            return cls.from_datetime(datetime.now(pytz.timezone(timezone)))
        return cls.from_datetime(datetime.now())

    @classmethod
    def parse(cls, text: str) -> 'ClockTime':
        """Parse "HH:MM" through the clamping constructor; bad text gives ZERO."""
        match = _CLOCK_RE.match(text or "")
        if not match:
            return cls.ZERO
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    # ==================== Arithmetic ====================

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def add(self, other: 'ClockTime') -> 'ClockTime':
        """Sum with minute carry. The hour is not capped at 24."""
        hour = self.hour + other.hour
        minute = self.minute + other.minute
        while minute > 59:
            hour += 1
            minute -= 60
        return ClockTime._internal(hour, minute)

    def subtract(self, other: 'ClockTime') -> 'ClockTime':
        """Difference, saturating at ZERO instead of going negative."""
        hour = self.hour - other.hour
        if hour < 0:
            return ClockTime.ZERO
        minute = self.minute - other.minute
        while minute < 0:
            if hour == 0:
                return ClockTime.ZERO
            hour -= 1
            minute += 60
        return ClockTime._internal(hour, minute)

    def __add__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.subtract(other)

    # ==================== Ordering ====================

    def __lt__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.total_minutes < other.total_minutes

    def __le__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.total_minutes <= other.total_minutes

    def __gt__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.total_minutes > other.total_minutes

    def __ge__(self, other):
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.total_minutes >= other.total_minutes

    # ==================== Conversion ====================

    @property
    def as_duration(self) -> timedelta:
        return timedelta(hours=self.hour, minutes=self.minute)

    def at_date(self, day: Union[date, datetime]) -> datetime:
        """Attach this time of day to a calendar date."""
        if isinstance(day, datetime):
            midnight = day.replace(hour=0, minute=0, second=0, microsecond=0)
        else:
            midnight = datetime(day.year, day.month, day.day)
        return midnight + self.as_duration

    def to_dict(self) -> dict:
        return {'hour': self.hour, 'minute': self.minute}

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


ClockTime.ZERO = ClockTime._internal(0, 0)
ClockTime.MIN = ClockTime.ZERO
ClockTime.MAX = ClockTime._internal(24, 0)
