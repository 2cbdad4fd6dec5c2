"""
Core utilities for the sun calendar.

Provides configuration, logging, errors, messages and timezone handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from . import messages
from .errors import (
    SunCalendarError,
    GeocodeFailed,
    GeocodeEmpty,
    CalendarFailed,
    MissingCalendarData,
)
from .time_utils import TimeZoneUtils, FormatterCache

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "messages",
    "SunCalendarError",
    "GeocodeFailed",
    "GeocodeEmpty",
    "CalendarFailed",
    "MissingCalendarData",
    "TimeZoneUtils",
    "FormatterCache",
]
