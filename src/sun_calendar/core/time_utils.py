"""
Date and timezone utilities.

Centralizes timezone-aware date/time formatting and "now"-dependent checks.
Formatters are built once per (timezone, language) and kept in a
FormatterCache owned by the TimeZoneUtils instance.
"""

import logging
from datetime import date, datetime
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants
from .messages import MONTHS, WEEKDAYS

if TYPE_CHECKING:
    from ..models import PhotoWindow, SunDay


def parse_timezone(timezone_str: str) -> BaseTzInfo:
    """
    Parse timezone string to pytz timezone object.

    Args:
        timezone_str: Timezone string (e.g., 'Europe/Warsaw', 'UTC')

    Returns:
        pytz timezone object

    Raises:
        ValueError: If timezone is invalid
    """
    try:
        return pytz.timezone(timezone_str)
    except pytz.exceptions.UnknownTimeZoneError:
        raise ValueError(f"Invalid timezone: {timezone_str}")


def parse_timestamp(timestamp: str, tz: BaseTzInfo) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime in `tz`.

    Naive timestamps (the forecast API's `timezone=auto` output) are read as
    wall-clock time in `tz`; timestamps with an offset are converted.
    """
    if timestamp.endswith("Z"):
        timestamp = timestamp[:-1] + "+00:00"
    dt = datetime.fromisoformat(timestamp)
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def minutes_of_day(timestamp: str) -> int:
    """
    Minutes since midnight from the hour:minute digits of a timestamp.

    The date part and any offset are ignored.
    """
    time_part = timestamp.split("T")[1]
    hours, minutes = time_part.split(":")[:2]
    return int(hours) * 60 + int(minutes[:2])


def format_duration(minutes: int) -> str:
    """Format a minute count as e.g. '16 h 20 min'."""
    sign = "-" if minutes < 0 else ""
    hours, rest = divmod(abs(minutes), 60)
    return f"{sign}{hours} h {rest:02d} min"


class ZoneFormatter:
    """Date and clock formatting for one timezone and display language."""

    def __init__(self, timezone_str: str, language: str = constants.DEFAULT_LANGUAGE):
        self.timezone_str = timezone_str
        self.tz = parse_timezone(timezone_str)
        self.language = language
        self._weekdays = WEEKDAYS.get(language, WEEKDAYS[constants.DEFAULT_LANGUAGE])
        self._months = MONTHS.get(language, MONTHS[constants.DEFAULT_LANGUAGE])

    def format_date(self, date_str: str) -> str:
        # Anchor at local noon so offset rounding cannot flip the day
        day = date.fromisoformat(date_str)
        noon = self.tz.localize(datetime(day.year, day.month, day.day, 12, 0))
        weekday = self._weekdays[noon.weekday()]
        month = self._months[noon.month - 1]
        if self.language == "en":
            return f"{weekday}, {month} {noon.day}"
        return f"{weekday}, {noon.day} {month}"

    def format_time(self, timestamp: str) -> str:
        local = parse_timestamp(timestamp, self.tz)
        if self.language == "en":
            hour = local.hour % 12 or 12
            suffix = "AM" if local.hour < 12 else "PM"
            return f"{hour:02d}:{local.minute:02d} {suffix}"
        return f"{local.hour:02d}:{local.minute:02d}"


class FormatterCache:
    """Per-(timezone, language) ZoneFormatter store."""

    def __init__(self):
        self._formatters: Dict[Tuple[str, str], ZoneFormatter] = {}

    def get(self, timezone_str: str, language: str) -> ZoneFormatter:
        key = (timezone_str, language)
        formatter = self._formatters.get(key)
        if formatter is None:
            formatter = ZoneFormatter(timezone_str, language)
            self._formatters[key] = formatter
        return formatter

    def clear(self) -> None:
        self._formatters.clear()

    def __len__(self) -> int:
        return len(self._formatters)


class TimeZoneUtils:
    """Utilities for timezone-aware display and 'now' checks."""

    def __init__(
        self,
        language: str = constants.DEFAULT_LANGUAGE,
        cache: Optional[FormatterCache] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize timezone utilities.

        Args:
            language: Display language for dates and clock times
            cache: Formatter cache (a private one is created when omitted)
            logger: Logger instance
        """
        self.language = language
        self.cache = cache if cache is not None else FormatterCache()
        self.logger = logger or logging.getLogger(__name__)

    def _formatter(self, timezone_str: str) -> ZoneFormatter:
        return self.cache.get(timezone_str, self.language)

    @staticmethod
    def now_in_zone(
        timezone_str: str,
        now: Optional[datetime] = None
    ) -> datetime:
        """
        Get the current instant as local time in the given timezone.

        Args:
            timezone_str: Timezone string
            now: Reference time (defaults to now in UTC, naive values are read as UTC)

        Returns:
            Timezone-aware datetime in the target timezone
        """
        tz = parse_timezone(timezone_str)
        if now is None:
            now = datetime.now(pytz.UTC)
        elif now.tzinfo is None:
            now = pytz.UTC.localize(now)
        return now.astimezone(tz)

    def current_date_in_zone(
        self,
        timezone_str: str,
        now: Optional[datetime] = None
    ) -> str:
        """Today's calendar date (YYYY-MM-DD) as observed in the timezone."""
        return self.now_in_zone(timezone_str, now).date().isoformat()

    def is_today(
        self,
        date_str: str,
        timezone_str: str,
        now: Optional[datetime] = None
    ) -> bool:
        return date_str == self.current_date_in_zone(timezone_str, now)

    def is_daylight_now(
        self,
        day: "SunDay",
        timezone_str: str,
        now: Optional[datetime] = None
    ) -> bool:
        """
        Check whether the local time of day falls in [sunrise, sunset).

        The sunset minute itself counts as night.
        """
        local = self.now_in_zone(timezone_str, now)
        now_minutes = local.hour * 60 + local.minute
        sunrise_minutes = minutes_of_day(day.sunrise)
        sunset_minutes = minutes_of_day(day.sunset)

        self.logger.debug(
            f"Daylight check in {timezone_str}: now={now_minutes} "
            f"sunrise={sunrise_minutes} sunset={sunset_minutes}"
        )

        return sunrise_minutes <= now_minutes < sunset_minutes

    def format_date(self, date_str: str, timezone_str: str) -> str:
        """Long weekday/month/day label, e.g. 'piątek, 21 czerwca'."""
        return self._formatter(timezone_str).format_date(date_str)

    def format_time(self, timestamp: str, timezone_str: str) -> str:
        """Hour:minute of a timestamp in the timezone."""
        return self._formatter(timezone_str).format_time(timestamp)

    def format_range(self, start: str, end: str, timezone_str: str) -> str:
        return f"{self.format_time(start, timezone_str)} – {self.format_time(end, timezone_str)}"

    def format_window(self, window: "PhotoWindow", timezone_str: str) -> str:
        return self.format_range(window.start, window.end, timezone_str)

    def format_dual_window(
        self,
        first: "PhotoWindow",
        second: "PhotoWindow",
        timezone_str: str
    ) -> str:
        """Morning and evening windows on one line."""
        return (
            f"{self.format_window(first, timezone_str)} / "
            f"{self.format_window(second, timezone_str)}"
        )

    @staticmethod
    def format_duration(minutes: int) -> str:
        return format_duration(minutes)
