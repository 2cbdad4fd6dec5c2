"""
Daily sun data models.

Contains DTOs for one day of sunrise/sunset data and the photography
windows derived from it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SunDay:
    """
    Sunrise and sunset for one calendar day at a location.

    `date` is ISO YYYY-MM-DD in the location's timezone. `sunrise` and
    `sunset` are ISO 8601 timestamps as returned by the forecast provider.
    """

    date: str
    sunrise: str
    sunset: str
    day_length_minutes: int
    night_length_minutes: int


@dataclass(frozen=True)
class PhotoWindow:
    """A start/end timestamp pair."""

    start: str
    end: str


@dataclass(frozen=True)
class PhotoWindows:
    """Blue and golden hour windows around sunrise and sunset."""

    morning_blue: PhotoWindow
    morning_golden: PhotoWindow
    evening_golden: PhotoWindow
    evening_blue: PhotoWindow
