"""
Main entry point for the sun calendar.

Looks up a place, fetches its sunrise/sunset calendar and prints the
today section, day cards and an optional comparison with a second place.
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import List, Optional, Tuple

from .core import Config, setup_logger, LoggerContext, constants
from .core.time_utils import FormatterCache, TimeZoneUtils
from .api import OpenMeteoAPI
from .algorithms import ComparisonEngine, PhotoWindowCalculator
from .services import SearchResult, SearchSlot, SunCalendarService
from .display import CalendarRenderer


class SunCalendarApp:
    """Main application for the sun calendar."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        language: Optional[str] = None,
        past_days: Optional[int] = None,
        future_days: Optional[int] = None,
        log_level: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            language: Display language, overrides configuration
            past_days: Days back, overrides configuration
            future_days: Days ahead, overrides configuration
            log_level: Logging level, overrides configuration
            logger: Logger instance (configured from settings when omitted)
        """
        self.config = Config(config_file)

        self.language = language or self.config.language
        if self.language not in constants.SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported display language: {self.language}")
        self.past_days = self.config.past_days if past_days is None else past_days
        self.future_days = self.config.future_days if future_days is None else future_days

        self.logger = logger or setup_logger(
            log_file=self.config.log_file,
            log_level=log_level or self.config.log_level,
            console_level=self.config.log_console_level
        )
        self.logger.info(f"Configuration: {self.config}")

        # One client per pipeline; a requests.Session is not shared across threads
        self.api_client: Optional[OpenMeteoAPI] = None
        self.comparison_api_client: Optional[OpenMeteoAPI] = None
        self.service: Optional[SunCalendarService] = None
        self.comparison_service: Optional[SunCalendarService] = None
        self.time_utils: Optional[TimeZoneUtils] = None
        self.comparison: Optional[ComparisonEngine] = None
        self.renderer: Optional[CalendarRenderer] = None

        # Latest applied result per pipeline
        self.primary_slot: SearchSlot[SearchResult] = SearchSlot()
        self.comparison_slot: SearchSlot[SearchResult] = SearchSlot()

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        self.api_client = self._create_api_client()
        self.service = self._create_service(self.api_client)
        self.comparison_api_client = self._create_api_client()
        self.comparison_service = self._create_service(self.comparison_api_client)

        self.time_utils = TimeZoneUtils(
            language=self.language,
            cache=FormatterCache(),
            logger=self.logger
        )
        self.comparison = ComparisonEngine(logger=self.logger)
        self.renderer = CalendarRenderer(
            time_utils=self.time_utils,
            photo_calc=PhotoWindowCalculator(logger=self.logger),
            language=self.language,
            logger=self.logger
        )

        self.logger.info("All components initialized successfully")

    def _create_api_client(self) -> OpenMeteoAPI:
        return OpenMeteoAPI(
            geocoding_url=self.config.geocoding_url,
            forecast_url=self.config.forecast_url,
            language=self.language,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            logger=self.logger
        )

    def _create_service(self, api_client: OpenMeteoAPI) -> SunCalendarService:
        return SunCalendarService(
            api_client=api_client,
            past_days=self.past_days,
            future_days=self.future_days,
            language=self.language,
            logger=self.logger
        )

    def search(
        self,
        query: str,
        compare_query: Optional[str] = None
    ) -> Tuple[SearchResult, Optional[SearchResult]]:
        """
        Run the primary and comparison pipelines.

        A comparison needs a base location. Without a successful base in
        the primary slot the primary search runs first and the comparison
        is skipped if it fails. Once a base exists, both pipelines run side
        by side, each on its own client.

        Returns:
            Primary result and comparison result (None when not requested
            or skipped)
        """
        if self.service is None or self.comparison_service is None:
            raise RuntimeError("Components not properly initialized")

        if not compare_query:
            with LoggerContext(self.logger, f"search for '{query}'"):
                return self.service.search_into(self.primary_slot, query), None

        with LoggerContext(self.logger, f"search for '{query}' and '{compare_query}'"):
            base = self.primary_slot.value
            if base is None or not base.ok:
                primary = self.service.search_into(self.primary_slot, query)
                if not primary.ok:
                    self.logger.info(f"Skipping comparison with '{compare_query}': no base location")
                    return primary, None
                return primary, self.comparison_service.search_into(
                    self.comparison_slot, compare_query
                )

            with ThreadPoolExecutor(max_workers=2) as executor:
                primary_future = executor.submit(
                    self.service.search_into, self.primary_slot, query
                )
                other_future = executor.submit(
                    self.comparison_service.search_into, self.comparison_slot, compare_query
                )
                return primary_future.result(), other_future.result()

    def render(
        self,
        primary: SearchResult,
        other: Optional[SearchResult] = None,
        now: Optional[datetime] = None
    ) -> str:
        """Render search results as text."""
        if self.renderer is None or self.time_utils is None or self.comparison is None:
            raise RuntimeError("Components not properly initialized")

        blocks: List[str] = [self.renderer.render_banner(primary)]

        if not primary.ok:
            return "\n".join(blocks)

        location = primary.location
        current_date = self.time_utils.current_date_in_zone(location.timezone, now)

        today = self.comparison.find_today(primary.days, current_date)
        if today is not None:
            blocks.append(self.renderer.render_today(location, today, now))

        blocks.append(self.renderer.render_days(
            location, primary.days, current_date, self.past_days, self.future_days, now
        ))

        if other is not None:
            if not other.ok:
                blocks.append(self.renderer.render_banner(other))
            else:
                rows = self.comparison.compare_upcoming(primary.days, other.days, current_date)
                blocks.append(self.renderer.render_comparison(location, other.location, rows))

        return "\n\n".join(blocks)

    def run(
        self,
        query: Optional[str] = None,
        compare_query: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> int:
        """
        Search, render and print.

        Args:
            query: Place name (defaults to the configured city)
            compare_query: Optional second place to compare with
            now: Reference instant for "today" and daylight checks

        Returns:
            Process exit code: 1 if the primary search failed, else 0
        """
        try:
            self.initialize_components()

            query = query if query is not None else self.config.default_city
            primary, other = self.search(query, compare_query)
            print(self.render(primary, other, now))
            return 0 if primary.ok else 1

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise

        finally:
            for client in (self.api_client, self.comparison_api_client):
                if client:
                    client.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Sunrise, sunset and photography windows for a place"
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Place name. Default: configured city"
    )
    parser.add_argument(
        "--compare",
        type=str,
        default=None,
        help="Second place to compare day length with"
    )
    parser.add_argument(
        "--past",
        type=int,
        default=None,
        help=f"Days back (0-{constants.MAX_PAST_DAYS})"
    )
    parser.add_argument(
        "--future",
        type=int,
        default=None,
        help=f"Days ahead (0-{constants.MAX_FUTURE_DAYS})"
    )
    parser.add_argument(
        "--language",
        choices=constants.SUPPORTED_LANGUAGES,
        default=None,
        help="Display language"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    args = parser.parse_args()

    try:
        app = SunCalendarApp(
            config_file=args.config,
            language=args.language,
            past_days=args.past,
            future_days=args.future,
            log_level=args.log_level
        )
        sys.exit(app.run(query=args.query, compare_query=args.compare))
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
