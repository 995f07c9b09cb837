from .event_grid import EventGrid, EventPlacement
from .layout_engine import LayoutEngine, layout

__all__ = [
    "EventGrid",
    "EventPlacement",
    "LayoutEngine",
    "layout",
]
