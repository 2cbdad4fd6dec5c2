"""
Business logic services for the sun calendar.

Services orchestrate API operations and hold search results.
"""

from .calendar_service import SunCalendarService
from .session import SearchResult, SearchSlot

__all__ = [
    "SunCalendarService",
    "SearchResult",
    "SearchSlot",
]
