"""
Application-wide constants for the sun calendar.

Provider limits and default endpoints live here. Values that users may
want to change are also exposed through Config.
"""

# Open-Meteo endpoints
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1"

# Provider limits for the daily calendar window
MAX_PAST_DAYS = 92  # Open-Meteo allows up to 92 days back
MAX_FUTURE_DAYS = 16  # Forecast supports up to 16 days ahead

# Default calendar window
DEFAULT_PAST_DAYS = 7
DEFAULT_FUTURE_DAYS = 14
DEFAULT_CITY = "Wrocław"

# Geocoder returns only the best match
GEOCODE_RESULT_COUNT = 1

MINUTES_PER_DAY = 24 * 60

# Blue hour / golden hour width around sunrise and sunset
PHOTO_WINDOW_MINUTES = 60

# Display languages
DEFAULT_LANGUAGE = "pl"
SUPPORTED_LANGUAGES = ("pl", "en")

# Error codes
GEOCODE_FAILED = "GEOCODE_FAILED"
GEOCODE_EMPTY = "GEOCODE_EMPTY"
CALENDAR_FAILED = "CALENDAR_FAILED"
MISSING_CALENDAR_DATA = "MISSING_CALENDAR_DATA"
UNKNOWN = "UNKNOWN"
