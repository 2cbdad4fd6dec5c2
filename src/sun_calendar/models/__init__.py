"""
Data models for the sun calendar.

Contains DTOs for geocoded locations, daily sun data, photo windows and comparisons.
"""

from .location import LocationResult
from .sun_day import SunDay, PhotoWindow, PhotoWindows
from .comparison import ComparisonRow

__all__ = [
    "LocationResult",
    "SunDay",
    "PhotoWindow",
    "PhotoWindows",
    "ComparisonRow",
]
