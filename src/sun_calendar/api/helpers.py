"""
Helper functions for API operations.

Provides request-window arithmetic and response parsing.
"""

from datetime import date, timedelta
from typing import Any, Dict, Optional, Tuple

from ..core import constants


def clamp_range(value: int, minimum: int, maximum: int) -> int:
    """Clamp value into [minimum, maximum]."""
    return min(max(value, minimum), maximum)


def format_iso_date(day: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return day.isoformat()


def calendar_window(
    past_days: int,
    future_days: int,
    today: Optional[date] = None
) -> Tuple[str, str]:
    """
    Compute the inclusive start/end dates of a calendar request.

    Day counts are silently clamped to the provider limits.

    Args:
        past_days: Days before today to include
        future_days: Days after today to include
        today: Reference date (defaults to the local date.today())

    Returns:
        Tuple of (start_date, end_date) as YYYY-MM-DD strings
    """
    if today is None:
        today = date.today()

    limited_past = clamp_range(past_days, 0, constants.MAX_PAST_DAYS)
    limited_future = clamp_range(future_days, 0, constants.MAX_FUTURE_DAYS)

    start = today - timedelta(days=limited_past)
    end = today + timedelta(days=limited_future)
    return format_iso_date(start), format_iso_date(end)


def first_geocode_result(response: Any) -> Optional[Dict[str, Any]]:
    """
    Return the best match of a geocoding response, or None.

    Expected format:
    {
        "results": [
            {"name": "...", "country": "...", "timezone": "...",
             "latitude": 51.1, "longitude": 17.03}
        ]
    }
    """
    if not isinstance(response, dict):
        return None
    results = response.get("results")
    if not results:
        return None
    return results[0]
