"""
Geocoding operations for the Open-Meteo geocoding API.

Resolves a free-text place name to a location with its timezone.
"""

import logging
from typing import Any, Dict

import requests  # type: ignore

from ..core import constants
from ..core.errors import GeocodeEmpty, GeocodeFailed
from ..models import LocationResult
from .helpers import first_geocode_result


class GeocodingAPI:
    """Mixin for geocoding API operations."""

    # Attributes provided by OpenMeteoAPI / APIClient
    logger: logging.Logger
    geocoding_url: str
    language: str

    def geocode_location(self, query: str) -> LocationResult:
        """
        Look up the best match for a place name.

        Args:
            query: Place name

        Returns:
            First matching location

        Raises:
            GeocodeEmpty: If the query is blank (no request is made) or nothing matched
            GeocodeFailed: If the request fails or returns a non-success status
        """
        name = (query or "").strip()
        if not name:
            raise GeocodeEmpty("Empty query")

        self.logger.info(f"Geocoding '{name}'")

        params: Dict[str, Any] = {
            "name": name,
            "count": constants.GEOCODE_RESULT_COUNT,
            "language": self.language,
        }

        try:
            response = self.get_json(f"{self.geocoding_url}/search", params=params)  # type: ignore[attr-defined]
        except requests.exceptions.RequestException as e:
            raise GeocodeFailed(str(e)) from e

        best = first_geocode_result(response)
        if best is None:
            self.logger.warning(f"No geocoding results for '{name}'")
            raise GeocodeEmpty(f"No results for '{name}'")

        try:
            location = LocationResult.from_api(best)
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeFailed(f"Malformed geocoding result: {e}") from e

        self.logger.info(
            f"Resolved '{name}' to {location.name} ({location.country}), "
            f"{location.latitude}, {location.longitude}, {location.timezone}"
        )
        return location
