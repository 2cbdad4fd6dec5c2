"""
Day and night length calculation.

Turns the forecast API's parallel daily arrays into SunDay records.

Day length is the difference between the sunset and sunrise clock times:

    day_length = sunset_minutes_of_day - sunrise_minutes_of_day
    night_length = 1440 - day_length

Only the hour:minute components are used, so the result equals elapsed
time for same-day sunrise/sunset. Values outside [0, 1440] are passed
through unchanged and logged.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core import constants
from ..core.errors import MissingCalendarData
from ..core.time_utils import minutes_of_day
from ..models import SunDay

DAILY_FIELDS = ("time", "sunrise", "sunset")


class SunDayNormalizer:
    """Builds SunDay records from raw daily forecast data."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def build_day(self, date: str, sunrise: str, sunset: str) -> SunDay:
        """
        Build one SunDay.

        Args:
            date: Calendar date (YYYY-MM-DD)
            sunrise: Sunrise timestamp
            sunset: Sunset timestamp

        Returns:
            SunDay with day and night length in minutes
        """
        day_length = minutes_of_day(sunset) - minutes_of_day(sunrise)

        if day_length < 0 or day_length > constants.MINUTES_PER_DAY:
            self.logger.warning(
                f"Day length out of range for {date}: {day_length} min "
                f"(sunrise={sunrise}, sunset={sunset})"
            )

        return SunDay(
            date=date,
            sunrise=sunrise,
            sunset=sunset,
            day_length_minutes=day_length,
            night_length_minutes=constants.MINUTES_PER_DAY - day_length,
        )

    def normalize(self, daily: Optional[Dict[str, Any]]) -> List[SunDay]:
        """
        Convert the `daily` block of a forecast response into SunDays.

        Args:
            daily: Mapping with parallel `time`, `sunrise` and `sunset` arrays

        Returns:
            SunDays in the order returned by the provider

        Raises:
            MissingCalendarData: If any array is missing, null, or shorter than `time`
        """
        if daily is None:
            raise MissingCalendarData("Response has no daily block")

        missing = [field for field in DAILY_FIELDS if daily.get(field) is None]
        if missing:
            raise MissingCalendarData(f"Missing daily fields: {', '.join(missing)}")

        dates = daily["time"]
        sunrises = daily["sunrise"]
        sunsets = daily["sunset"]

        if len(sunrises) < len(dates) or len(sunsets) < len(dates):
            raise MissingCalendarData(
                f"Daily arrays are shorter than time: time={len(dates)}, "
                f"sunrise={len(sunrises)}, sunset={len(sunsets)}"
            )

        days = []
        for date, sunrise, sunset in zip(dates, sunrises, sunsets):
            if not sunrise or not sunset:
                # Polar day/night: the provider reports no event
                self.logger.warning(f"Skipping {date}: no sunrise/sunset reported")
                continue
            days.append(self.build_day(date, sunrise, sunset))

        self.logger.debug(f"Normalized {len(days)} days")
        return days
