"""
Comparison data models.
"""

from dataclasses import dataclass

from .sun_day import SunDay


@dataclass(frozen=True)
class ComparisonRow:
    """Two locations' sun data for the same date.

    `delta` is other minus base day length; positive means `other` has the
    longer day.
    """

    date: str
    base: SunDay
    other: SunDay
    delta: int
