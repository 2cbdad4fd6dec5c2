"""
Calculation algorithms for the sun calendar.

Provides day-length normalization, photography windows and the
two-location comparison.
"""

from .day_length import SunDayNormalizer
from .photo_windows import PhotoWindowCalculator
from .comparison import ComparisonEngine

__all__ = [
    "SunDayNormalizer",
    "PhotoWindowCalculator",
    "ComparisonEngine",
]
