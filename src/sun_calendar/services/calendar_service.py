"""
Sun calendar search service.

Runs the geocode-then-fetch pipeline for a place name and turns every
failure into a localized, user-facing message.
"""

import logging
from datetime import date
from typing import Optional

from ..api import OpenMeteoAPI
from ..core import constants, messages
from ..core.errors import error_code
from .session import SearchResult, SearchSlot


class SunCalendarService:
    """Service that resolves a place and fetches its sun calendar."""

    def __init__(
        self,
        api_client: OpenMeteoAPI,
        past_days: int = constants.DEFAULT_PAST_DAYS,
        future_days: int = constants.DEFAULT_FUTURE_DAYS,
        language: str = constants.DEFAULT_LANGUAGE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize calendar service.

        Args:
            api_client: Open-Meteo API client
            past_days: Days before today to fetch
            future_days: Days after today to fetch
            language: Language for error messages
            logger: Logger instance
        """
        self.api_client = api_client
        self.past_days = past_days
        self.future_days = future_days
        self.language = language
        self.logger = logger or logging.getLogger(__name__)

    def search(self, query: str, today: Optional[date] = None) -> SearchResult:
        """
        Geocode a place name, then fetch its calendar.

        The calendar request starts only after geocoding succeeds. Errors are
        reported in the result, never raised.

        Args:
            query: Place name
            today: Reference date for the calendar window

        Returns:
            SearchResult with location and days, or an error code and message
        """
        name = (query or "").strip()

        try:
            location = self.api_client.geocode_location(name)
            days = self.api_client.fetch_sun_calendar(
                location,
                past_days=self.past_days,
                future_days=self.future_days,
                today=today
            )
        except Exception as e:
            code = error_code(e)
            if code == constants.UNKNOWN:
                self.logger.error(f"Unexpected error searching '{name}': {e}", exc_info=True)
            else:
                self.logger.warning(f"Search for '{name}' failed: {code} ({e})")
            return SearchResult(
                query=name,
                error_code=code,
                error_message=messages.error_message(code, self.language),
            )

        return SearchResult(query=name, location=location, days=days)

    def search_into(
        self,
        slot: SearchSlot,
        query: str,
        today: Optional[date] = None
    ) -> SearchResult:
        """
        Run a search and store its result in a slot.

        A result that arrives after a newer search was applied is discarded.
        """
        token = slot.begin()
        result = self.search(query, today=today)
        if not slot.apply(token, result):
            self.logger.info(f"Discarded stale result for '{result.query}' (request {token})")
        return result
