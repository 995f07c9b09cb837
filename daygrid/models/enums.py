# File: daygrid/models/enums.py

from enum import Enum

class MinuteSlotSize(Enum):
    """Slot granularity of the day grid, in minutes."""
    MINUTES_5 = 5
    MINUTES_15 = 15
    MINUTES_30 = 30
    MINUTES_60 = 60

    @property
    def minutes(self) -> int:
        return self.value

    @classmethod
    def from_minutes(cls, minutes) -> 'MinuteSlotSize':
        """Resolve a minute count, falling back to hourly slots if unknown."""
        if isinstance(minutes, cls):
            return minutes
        try:
            return cls(int(minutes))
        except (TypeError, ValueError):
            return cls.MINUTES_60
