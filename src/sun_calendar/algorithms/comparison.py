"""
Two-location day length comparison.

Aligns two calendars on date (inner join) and reports how much longer or
shorter the other location's day is.
"""

import logging
from typing import List, Optional, Tuple

from ..models import ComparisonRow, SunDay


class ComparisonEngine:
    """Joins and splits SunDay calendars."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def compare(self, base: List[SunDay], other: List[SunDay]) -> List[ComparisonRow]:
        """
        Compare two calendars date by date.

        Rows follow `base` order; dates missing from either calendar are dropped.

        Args:
            base: Calendar of the primary location
            other: Calendar of the compared location

        Returns:
            One ComparisonRow per date present in both calendars
        """
        other_by_date = {day.date: day for day in other}

        rows = []
        for day in base:
            match = other_by_date.get(day.date)
            if match is None:
                continue
            rows.append(ComparisonRow(
                date=day.date,
                base=day,
                other=match,
                delta=match.day_length_minutes - day.day_length_minutes,
            ))

        self.logger.debug(
            f"Compared {len(base)} base days with {len(other)} other days: {len(rows)} rows"
        )
        return rows

    @staticmethod
    def split_days(
        days: List[SunDay],
        current_date: str
    ) -> Tuple[List[SunDay], List[SunDay]]:
        """
        Split a calendar into past days and upcoming days (today included).

        ISO dates compare correctly as strings.
        """
        past = [day for day in days if day.date < current_date]
        upcoming = [day for day in days if day.date >= current_date]
        return past, upcoming

    @staticmethod
    def find_today(days: List[SunDay], current_date: str) -> Optional[SunDay]:
        return next((day for day in days if day.date == current_date), None)

    def compare_upcoming(
        self,
        base: List[SunDay],
        other: List[SunDay],
        current_date: str
    ) -> List[ComparisonRow]:
        """Compare only today and later dates of the base calendar."""
        _, upcoming = self.split_days(base, current_date)
        return self.compare(upcoming, other)
