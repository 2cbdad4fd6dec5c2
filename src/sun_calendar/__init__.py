"""
Sun Calendar

This package looks up a place, fetches its daily sunrise and sunset times
from Open-Meteo and derives day/night length, golden/blue hour windows
and day-length comparisons between two places.
"""

__version__ = "0.1.0"
__description__ = "Sunrise/sunset calendar with photography windows"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "SunCalendarApp":
        from .main import SunCalendarApp
        return SunCalendarApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "SunCalendarApp",
]
