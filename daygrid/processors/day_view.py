# File: daygrid/processors/day_view.py
"""
Day view processing module.
Composes the layout engine with the hours timeline, slot hit-testing and
the live time indicator into geometry a renderer can paint directly.
"""

import datetime
from typing import Iterable, List, Optional, Tuple, Union

from daygrid.core.config_manager import Config
from daygrid.core.layout_engine import LayoutEngine
from daygrid.models import (
    CalendarEvent, ClockTime, PositionedTile, TimelineLabel, ViewConfig, event_from_dict
)
from daygrid.utils.logger import setup_logger

HOURS_A_DAY = 24


class DayView:
    """Geometry for a single day column of the calendar."""

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize day view.

        Args:
            config: View geometry settings (defaults to Config.view_config())
        """
        self.config = config or Config.view_config()
        self.engine = LayoutEngine(self.config)
        self.logger = setup_logger(__name__)

    @property
    def total_height(self) -> float:
        return self.config.hour_height * HOURS_A_DAY

    # ==================== Events ====================

    def load_events(self, records: Iterable[dict]) -> List[CalendarEvent]:
        """Build events from raw dictionaries, skipping unusable records."""
        events: List[CalendarEvent] = []
        for i, record in enumerate(records):
            event = event_from_dict(record)
            if event is None:
                self.logger.warning(
                    f"Skipping record {i} ('{record.get('summary', 'untitled')}'): unparseable start/end"
                )
                continue
            events.append(event)
        return events

    def events_for_day(self, events: Iterable[CalendarEvent], day: datetime.date) -> List[CalendarEvent]:
        """Keep the events that start on ``day``."""
        kept = []
        skipped = 0
        for event in events:
            if event.occurs_on(day):
                kept.append(event)
            else:
                skipped += 1
        if skipped:
            self.logger.debug(f"Skipped {skipped} events not starting on {day}")
        return kept

    def tiles(
        self,
        events: Iterable[CalendarEvent],
        day: datetime.date,
        region_width: float,
    ) -> List[PositionedTile]:
        """
        Position every event of ``day`` inside a region ``region_width`` wide.

        Returns:
            Tiles in start-time order
        """
        day_events = self.events_for_day(events, day)
        geometry = self.engine.layout(day_events, region_width)
        return [PositionedTile(event=event, rect=rect) for event, rect in geometry.items()]

    # ==================== Slots ====================

    def slot_count(self) -> int:
        return (HOURS_A_DAY * 60) // self.config.slot_minutes

    def slot_height(self) -> float:
        return self.config.slot_minutes * self.config.height_per_minute

    def slot_bounds(self, index: int) -> Tuple[float, float]:
        """Top and bottom y of a slot."""
        height = self.slot_height()
        return height * index, height * (index + 1)

    def slot_index_at(self, offset_y: float) -> int:
        """Slot under a vertical offset, clamped to the grid."""
        height = self.slot_height()
        if height <= 0:
            return 0
        index = int(offset_y // height)
        return min(max(index, 0), self.slot_count() - 1)

    def slot_at(self, offset_y: float, day: datetime.date) -> datetime.datetime:
        """Start of the slot a tap or long press at ``offset_y`` lands in."""
        minutes = self.config.slot_minutes * self.slot_index_at(offset_y)
        return datetime.datetime(day.year, day.month, day.day) + datetime.timedelta(minutes=minutes)

    # ==================== Timeline ====================

    def timeline_labels(self, day: datetime.date, show_half_hours: bool = False) -> List[TimelineLabel]:
        """Label boxes for the hours column, ordered top to bottom."""
        hour_height = self.config.hour_height
        offset = self.config.timeline_offset
        midnight = datetime.datetime(day.year, day.month, day.day)

        labels = []
        for hour in range(1, HOURS_A_DAY):
            top = hour_height * hour - offset
            labels.append(TimelineLabel(
                time=midnight + datetime.timedelta(hours=hour),
                top=top,
                bottom=top + hour_height,
            ))

        if show_half_hours:
            for hour in range(HOURS_A_DAY):
                top = hour_height * hour - offset + hour_height / 2
                labels.append(TimelineLabel(
                    time=midnight + datetime.timedelta(hours=hour, minutes=30),
                    top=top,
                    bottom=top + hour_height / 2,
                ))

        labels.sort(key=lambda label: label.top)
        return labels

    # ==================== Live indicator ====================

    def live_indicator_offset(
        self,
        now: Union[ClockTime, datetime.datetime, None] = None,
    ) -> Tuple[float, float]:
        """(x, y) of the current-time line."""
        if now is None:
            now = ClockTime.now(self.config.timezone)
        elif isinstance(now, datetime.datetime):
            now = ClockTime.from_datetime(now)

        x = self.config.hours_column_width + self.config.live_indicator_offset
        y = now.total_minutes * self.config.height_per_minute
        return x, y
