"""
Location data models.

Contains DTOs for geocoding results.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LocationResult:
    """Best geocoding match for a place name."""

    name: str
    timezone: str
    latitude: float
    longitude: float
    country: Optional[str] = None

    @classmethod
    def from_api(cls, result: Dict[str, Any]) -> "LocationResult":
        """Build from one entry of the geocoding `results` array."""
        return cls(
            name=result["name"],
            timezone=result["timezone"],
            latitude=float(result["latitude"]),
            longitude=float(result["longitude"]),
            country=result.get("country"),
        )
