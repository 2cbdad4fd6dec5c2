"""
Error types raised by the geocoding and forecast layers.

Each error carries a stable code used to look up a localized message.
"""

from . import constants


class SunCalendarError(Exception):
    """Base class for sun calendar failures."""

    code = constants.UNKNOWN

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)


class GeocodeFailed(SunCalendarError):
    """Geocoding request failed (network error or non-success status)."""

    code = constants.GEOCODE_FAILED


class GeocodeEmpty(SunCalendarError):
    """Geocoding succeeded but returned no matches, or the query was empty."""

    code = constants.GEOCODE_EMPTY


class CalendarFailed(SunCalendarError):
    """Forecast request failed."""

    code = constants.CALENDAR_FAILED


class MissingCalendarData(SunCalendarError):
    """Forecast response lacks the daily time/sunrise/sunset arrays."""

    code = constants.MISSING_CALENDAR_DATA


def error_code(exc: BaseException) -> str:
    """Return the error code for an exception, UNKNOWN for anything foreign."""
    if isinstance(exc, SunCalendarError):
        return exc.code
    return constants.UNKNOWN
