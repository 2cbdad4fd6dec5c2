"""
Forecast operations for the Open-Meteo forecast API.

Fetches daily sunrise/sunset times for a location and date window.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests  # type: ignore

from ..algorithms import SunDayNormalizer
from ..core import constants
from ..core.errors import CalendarFailed, MissingCalendarData
from ..models import LocationResult, SunDay
from .helpers import calendar_window


class ForecastAPI:
    """Mixin for forecast API operations."""

    # Attributes provided by OpenMeteoAPI / APIClient
    logger: logging.Logger
    forecast_url: str
    normalizer: SunDayNormalizer

    def fetch_sun_calendar(
        self,
        location: LocationResult,
        past_days: int = constants.DEFAULT_PAST_DAYS,
        future_days: int = constants.DEFAULT_FUTURE_DAYS,
        today: Optional[date] = None
    ) -> List[SunDay]:
        """
        Fetch daily sunrise/sunset for a window around today.

        Args:
            location: Geocoded location
            past_days: Days back (clamped to 0..92)
            future_days: Days ahead (clamped to 0..16)
            today: Reference date in the caller's local clock (defaults to today)

        Returns:
            SunDays in provider order

        Raises:
            CalendarFailed: If the request fails or returns a non-success status
            MissingCalendarData: If the daily arrays are missing
        """
        start_date, end_date = calendar_window(past_days, future_days, today)

        self.logger.info(
            f"Fetching sun calendar for {location.name}: {start_date} to {end_date}"
        )

        params: Dict[str, Any] = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "daily": "sunrise,sunset",
            "timezone": "auto",
            "start_date": start_date,
            "end_date": end_date,
        }

        try:
            response = self.get_json(f"{self.forecast_url}/forecast", params=params)  # type: ignore[attr-defined]
        except requests.exceptions.RequestException as e:
            raise CalendarFailed(str(e)) from e

        if not isinstance(response, dict):
            raise MissingCalendarData("Forecast response is not an object")

        days = self.normalizer.normalize(response.get("daily"))
        self.logger.info(f"Fetched {len(days)} days for {location.name}")
        return days
