# File: daygrid/core/layout_engine.py
"""
Layout engine for the day/week grid.
Turns one day's events into non-overlapping tile rectangles.
"""

from typing import Dict, Iterable, Optional, Union

from daygrid.core.event_grid import EventGrid, EventPlacement
from daygrid.models import CalendarEvent, DrawProperties, MinuteSlotSize, ViewConfig
from daygrid.utils.logger import setup_logger

logger = setup_logger(__name__)


class LayoutEngine:
    """Computes tile geometry for a set of events on a single day."""

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize layout engine.

        Args:
            config: View geometry defaults (height per minute, hours
                column width, slot size). Defaults to ViewConfig().
        """
        self.config = config or ViewConfig()

    def layout(
        self,
        events: Iterable[CalendarEvent],
        region_width: float,
        height_per_minute: Optional[float] = None,
        minute_slot_size: Union[MinuteSlotSize, int, None] = None,
        hours_column_width: Optional[float] = None,
    ) -> Dict[CalendarEvent, DrawProperties]:
        """
        Lay out events into columns.

        Args:
            events: Events of one day, in any order. Equal start times keep
                their iteration order. The same object passed twice counts once.
            region_width: Full width of the rendering area, hours column included
            height_per_minute: Vertical pixel scale (config default if None)
            minute_slot_size: Slot granularity multiplier (config default if None)
            hours_column_width: Left margin reserved for time labels

        Returns:
            Dict mapping each event to its rectangle, in start-time order
        """
        if height_per_minute is None:
            height_per_minute = self.config.height_per_minute
        if hours_column_width is None:
            hours_column_width = self.config.hours_column_width
        slot_size = (
            self.config.minute_slot_size
            if minute_slot_size is None
            else MinuteSlotSize.from_minutes(minute_slot_size)
        )
        available_width = max(region_width - hours_column_width, 0.0)

        # Events hash by identity; a repeated object is laid out once
        ordered = sorted(dict.fromkeys(events), key=lambda e: e.start)
        if not ordered:
            return {}

        grid = EventGrid()
        for event in ordered:
            placement = EventPlacement.for_event(event)
            placement.calculate_top_and_height(slot_size, height_per_minute)
            grid.add(placement)

        run_count = grid.process_events(hours_column_width, available_width)
        logger.debug(f"Laid out {len(ordered)} events in {run_count} runs")

        return {p.event: p.finalize() for p in grid.placements}


def layout(
    events: Iterable[CalendarEvent],
    region_width: float,
    height_per_minute: float,
    minute_slot_size: Union[MinuteSlotSize, int],
    hours_column_width: float,
) -> Dict[CalendarEvent, DrawProperties]:
    """Functional entry point; see LayoutEngine.layout."""
    return LayoutEngine().layout(
        events,
        region_width,
        height_per_minute=height_per_minute,
        minute_slot_size=minute_slot_size,
        hours_column_width=hours_column_width,
    )
