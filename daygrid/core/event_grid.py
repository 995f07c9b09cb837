# File: daygrid/core/event_grid.py
"""
Column packing of overlapping events.

Events are grouped into runs of transitively overlapping intervals. Each
run is packed into columns first-fit, then every event is stretched right
across the following columns it does not collide with.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from daygrid.models import CalendarEvent, ClockTime, DrawProperties, MinuteSlotSize
from daygrid.utils.logger import setup_logger

logger = setup_logger(__name__)

Column = List['EventPlacement']


@dataclass
class EventPlacement:
    """Geometry of one event while the layout pass is still filling it in."""
    event: CalendarEvent
    start: datetime
    end: datetime
    top: Optional[float] = None
    height: Optional[float] = None
    left: Optional[float] = None
    width: Optional[float] = None

    @classmethod
    def for_event(cls, event: CalendarEvent) -> 'EventPlacement':
        return cls(event=event, start=event.start, end=event.end)

    def calculate_top_and_height(self, minute_slot_size: MinuteSlotSize, height_per_minute: float) -> None:
        """Vertical placement; the slot size scales pixels, it does not snap."""
        scale = minute_slot_size.minutes * height_per_minute
        start_time = ClockTime.from_datetime(self.start)
        self.top = (start_time.hour + start_time.minute / 60) * scale
        duration = ClockTime.from_duration(self.end - self.start)
        self.height = (duration.hour + duration.minute / 60) * scale

    def collides_with(self, other: 'EventPlacement') -> bool:
        """Half-open overlap test."""
        return self.end > other.start and self.start < other.end

    @property
    def is_complete(self) -> bool:
        return None not in (self.top, self.height, self.left, self.width)

    def finalize(self) -> DrawProperties:
        """Freeze into the final rectangle. Only valid once packing ran."""
        return DrawProperties(
            top=self.top,
            height=self.height,
            left=self.left,
            width=self.width,
            start=self.start,
            end=self.end,
        )


class EventGrid:
    """Append-only collection of placements for a single layout pass."""

    def __init__(self):
        self.placements: List[EventPlacement] = []

    def add(self, placement: EventPlacement) -> None:
        self.placements.append(placement)

    def runs(self) -> List[List[EventPlacement]]:
        """
        Split the (start-sorted) placements into overlap runs.

        An event joins the current run when it starts at or before the
        latest end seen in that run.
        """
        runs: List[List[EventPlacement]] = []
        current: List[EventPlacement] = []
        last_event_ending: Optional[datetime] = None

        for placement in self.placements:
            if last_event_ending is not None and placement.start > last_event_ending:
                runs.append(current)
                current = []
                last_event_ending = None

            current.append(placement)

            if last_event_ending is None or placement.end > last_event_ending:
                last_event_ending = placement.end

        if current:
            runs.append(current)
        return runs

    @staticmethod
    def assign_columns(run: List[EventPlacement]) -> List[Column]:
        """
        First column with no event colliding with the placement wins; else a
        new column. A zero-length event can sit after a longer one in the
        same column, so the last event alone does not bound the column.
        """
        columns: List[Column] = []
        for placement in run:
            for column in columns:
                if not any(other.collides_with(placement) for other in column):
                    column.append(placement)
                    break
            else:
                columns.append([placement])
        return columns

    def process_events(self, hours_column_width: float, events_column_width: float) -> int:
        """Set left and width on every placement. Returns the number of runs."""
        runs = self.runs()
        for index, run in enumerate(runs):
            columns = self.assign_columns(run)
            logger.debug(f"Run {index}: {len(run)} events in {len(columns)} columns")
            self.pack_events(columns, hours_column_width, events_column_width)
        return len(runs)

    def pack_events(self, columns: List[Column], hours_column_width: float, events_column_width: float) -> None:
        """Sets the left position and width of each event in one run."""
        count = len(columns)
        for column_index, column in enumerate(columns):
            for placement in column:
                placement.left = hours_column_width + (column_index / count) * events_column_width
                col_span = self.calculate_col_span(columns, placement, column_index)
                placement.width = (events_column_width * col_span) / count

    @staticmethod
    def calculate_col_span(columns: List[Column], placement: EventPlacement, column: int) -> int:
        """How many columns, starting at its own, an event can widen across."""
        col_span = 1
        for other_column in columns[column + 1:]:
            if any(placement.collides_with(other) for other in other_column):
                return col_span
            col_span += 1
        return col_span
