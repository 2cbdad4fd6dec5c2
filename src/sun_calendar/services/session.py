"""Search result slots with stale-response protection.

Each search takes a monotonically increasing token before it starts. When
its result arrives it is applied only if no newer search has already
been applied to the same slot.
"""
from dataclasses import dataclass, field
from itertools import count
from threading import RLock
from typing import Generic, List, Optional, TypeVar

from ..models import LocationResult, SunDay

T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one geocode-then-fetch pipeline run."""
    query: str
    location: Optional[LocationResult] = None
    days: List[SunDay] = field(default_factory=list)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_code is None


class SearchSlot(Generic[T]):
    """Thread-safe holder for the latest applied search result."""

    def __init__(self):
        self._tokens = count(1)
        self._applied_token = 0
        self._value: Optional[T] = None
        self._lock = RLock()

    def begin(self) -> int:
        """Reserve a token for a search that is about to start."""
        with self._lock:
            return next(self._tokens)

    def apply(self, token: int, value: T) -> bool:
        """Store value unless a newer search was already applied.

        Returns:
            True if the value was stored, False if it was stale
        """
        with self._lock:
            if token < self._applied_token:
                return False
            self._applied_token = token
            self._value = value
            return True

    @property
    def value(self) -> Optional[T]:
        with self._lock:
            return self._value

    def clear(self) -> None:
        with self._lock:
            self._value = None
