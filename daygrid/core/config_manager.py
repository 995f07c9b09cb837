# File: daygrid/core/config_manager.py
"""
Centralized configuration management for DayGrid.
Loads settings from environment variables and an optional JSON file.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv
import pytz

from daygrid.models import MinuteSlotSize, ViewConfig
from daygrid.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from daygrid/core/
    CONFIG_DIR = BASE_DIR / "config"

    # Files
    CONFIG_FILE = Path(os.getenv("DAYGRID_CONFIG_FILE", CONFIG_DIR / "view.json"))

    # Application Settings
    TIMEZONE = os.getenv("DAYGRID_TIMEZONE", "UTC")

    # Geometry
    HEIGHT_PER_MINUTE = _env_float("DAYGRID_HEIGHT_PER_MINUTE", 0.7)
    HOURS_COLUMN_WIDTH = _env_float("DAYGRID_HOURS_COLUMN_WIDTH", 50.0)
    SLOT_MINUTES = MinuteSlotSize.from_minutes(os.getenv("DAYGRID_SLOT_MINUTES", "60"))


    @classmethod
    def load_view_config(cls) -> Dict[str, Any]:
        """Load view overrides from JSON file; empty if the file is absent."""
        if not cls.CONFIG_FILE.exists():
            return {}

        with open(cls.CONFIG_FILE, 'r', encoding='utf-8') as f:
            return json.load(f)

    @classmethod
    def view_config(cls) -> ViewConfig:
        """Build a ViewConfig from the environment, overlaid with the JSON file."""
        data = {
            'height_per_minute': cls.HEIGHT_PER_MINUTE,
            'hours_column_width': cls.HOURS_COLUMN_WIDTH,
            'slot_minutes': cls.SLOT_MINUTES.minutes,
            'timezone': cls.TIMEZONE,
        }
        data.update(cls.load_view_config())
        return ViewConfig.from_dict(data)

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TIMEZONE}")

        file_timezone = cls.load_view_config().get("timezone")
        if file_timezone is not None and file_timezone not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone in {cls.CONFIG_FILE}: {file_timezone} (falling back to UTC)")

        if cls.HEIGHT_PER_MINUTE <= 0:
            errors.append(f"DAYGRID_HEIGHT_PER_MINUTE must be positive, got {cls.HEIGHT_PER_MINUTE}")

        if cls.HOURS_COLUMN_WIDTH < 0:
            errors.append(f"DAYGRID_HOURS_COLUMN_WIDTH cannot be negative, got {cls.HOURS_COLUMN_WIDTH}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
