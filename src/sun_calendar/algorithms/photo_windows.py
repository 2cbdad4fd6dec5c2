"""
Photography windows around sunrise and sunset.

Blue hour precedes sunrise and follows sunset; golden hour follows
sunrise and precedes sunset. Each window is PHOTO_WINDOW_MINUTES wide.
"""

import logging
from datetime import timedelta
from typing import Optional

from ..core import constants
from ..core.time_utils import parse_timestamp, parse_timezone
from ..models import PhotoWindow, PhotoWindows, SunDay


class PhotoWindowCalculator:

    def __init__(
        self,
        offset_minutes: int = constants.PHOTO_WINDOW_MINUTES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize calculator.

        Args:
            offset_minutes: Window width in minutes (default 60)
            logger: Logger instance
        """
        self.offset_minutes = offset_minutes
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def shift_time(timestamp: str, minutes: int, timezone_str: str) -> str:
        """
        Shift a timestamp by a number of minutes of local wall-clock time.

        The shifted wall-clock time is localized again in the timezone, so a
        DST change inside the window moves the UTC offset of the result.

        Args:
            timestamp: ISO 8601 timestamp (naive values are local to the timezone)
            minutes: Minutes to add (negative to subtract)
            timezone_str: IANA timezone of the location

        Returns:
            ISO 8601 timestamp with UTC offset
        """
        tz = parse_timezone(timezone_str)
        local = parse_timestamp(timestamp, tz)
        wall_clock = local.replace(tzinfo=None) + timedelta(minutes=minutes)
        shifted = tz.localize(wall_clock)
        timespec = "minutes" if shifted.second == 0 and shifted.microsecond == 0 else "seconds"
        return shifted.isoformat(timespec=timespec)

    def photo_windows(self, day: SunDay, timezone_str: str) -> PhotoWindows:
        """
        Calculate the four photography windows for a day.

        Args:
            day: Sun data for the day
            timezone_str: IANA timezone of the location

        Returns:
            Morning blue/golden and evening golden/blue windows
        """
        offset = self.offset_minutes

        windows = PhotoWindows(
            morning_blue=PhotoWindow(
                start=self.shift_time(day.sunrise, -offset, timezone_str),
                end=day.sunrise,
            ),
            morning_golden=PhotoWindow(
                start=day.sunrise,
                end=self.shift_time(day.sunrise, offset, timezone_str),
            ),
            evening_golden=PhotoWindow(
                start=self.shift_time(day.sunset, -offset, timezone_str),
                end=day.sunset,
            ),
            evening_blue=PhotoWindow(
                start=day.sunset,
                end=self.shift_time(day.sunset, offset, timezone_str),
            ),
        )

        self.logger.debug(f"Photo windows for {day.date} in {timezone_str}: {windows}")
        return windows
