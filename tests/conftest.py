# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and view configurations for all tests.
"""

import os
import sys
import tempfile
from datetime import datetime, date, timedelta
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep test log files out of the working tree
os.environ.setdefault("DAYGRID_LOG_DIR", str(Path(tempfile.gettempdir()) / "daygrid-test-logs"))

from daygrid.models import CalendarEvent, MinuteSlotSize, ViewConfig
from daygrid.core.layout_engine import LayoutEngine
from daygrid.processors.day_view import DayView


# ==================== Geometry Constants ====================

# 350px region with a 50px hours column leaves 300px for tiles,
# and 1px per minute on hourly slots puts 09:00 at y=540.
REGION_WIDTH = 350.0
HOURS_COLUMN_WIDTH = 50.0
AVAILABLE_WIDTH = REGION_WIDTH - HOURS_COLUMN_WIDTH


# ==================== Date/Time Fixtures ====================

@pytest.fixture
def day():
    """A fixed calendar day."""
    return date(2025, 11, 18)


@pytest.fixture
def at(day):
    """Build a datetime on the test day from "HH:MM"."""
    def _at(text: str) -> datetime:
        hour, minute = (int(part) for part in text.split(':'))
        return datetime(day.year, day.month, day.day) + timedelta(hours=hour, minutes=minute)

    return _at


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event(at):
    """Factory fixture for creating events from "HH:MM" strings."""
    def _create(start: str, end: str, summary: str = None) -> CalendarEvent:
        return CalendarEvent(
            summary=summary or f"{start}-{end}",
            start=at(start),
            end=at(end),
        )

    return _create


@pytest.fixture
def calendar_event(make_event):
    """A plain one-hour meeting."""
    return make_event("09:00", "10:00", "Team Meeting")


# ==================== Configuration Fixtures ====================

@pytest.fixture
def view_config():
    """Hourly slots, one pixel per minute, 50px hours column."""
    return ViewConfig(
        height_per_minute=1.0,
        hours_column_width=HOURS_COLUMN_WIDTH,
        minute_slot_size=MinuteSlotSize.MINUTES_60,
    )


@pytest.fixture
def engine(view_config):
    """Layout engine on the default test geometry."""
    return LayoutEngine(view_config)


@pytest.fixture
def day_view(view_config):
    """Day view on the default test geometry."""
    return DayView(view_config)


@pytest.fixture
def lay_out(engine):
    """Run the engine on the default region width."""
    def _lay_out(*events):
        return engine.layout(list(events), REGION_WIDTH)

    return _lay_out


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
