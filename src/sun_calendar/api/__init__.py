"""
API layer for Open-Meteo.

Provides the HTTP client plus geocoding and daily forecast operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .geocoding import GeocodingAPI
from .forecast import ForecastAPI
from ..algorithms import SunDayNormalizer
from ..core import constants
from . import helpers


class OpenMeteoAPI(GeocodingAPI, ForecastAPI, APIClient):
    """
    Unified API client for Open-Meteo.

    Combines geocoding and forecast operations over one HTTP session.
    """

    def __init__(
        self,
        geocoding_url: str = constants.DEFAULT_GEOCODING_URL,
        forecast_url: str = constants.DEFAULT_FORECAST_URL,
        language: str = constants.DEFAULT_LANGUAGE,
        timeout: Optional[float] = None,
        max_retries: int = 0,
        normalizer: Optional[SunDayNormalizer] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            geocoding_url: Geocoding API base URL (e.g. https://geocoding-api.open-meteo.com/v1)
            forecast_url: Forecast API base URL (e.g. https://api.open-meteo.com/v1)
            language: Language for geocoding result names
            timeout: Request timeout in seconds (None waits indefinitely)
            max_retries: Maximum number of retry attempts
            normalizer: Day record builder
            logger: Logger instance
        """
        super().__init__(timeout=timeout, max_retries=max_retries, logger=logger)

        self.geocoding_url = geocoding_url.rstrip("/")
        self.forecast_url = forecast_url.rstrip("/")
        self.language = language
        self.normalizer = normalizer or SunDayNormalizer(logger=self.logger)


__all__ = [
    "APIClient",
    "GeocodingAPI",
    "ForecastAPI",
    "OpenMeteoAPI",
    "helpers",
]
