"""Two-language (pl/en) message catalog and calendar names."""

from typing import Dict, List

from . import constants

_STRINGS: Dict[str, Dict[str, str]] = {
    # Errors
    "errors.geocodeFailed": {
        "pl": "Błąd geokodowania lokalizacji.",
        "en": "Failed to geocode the location.",
    },
    "errors.geocodeEmpty": {
        "pl": "Nie znaleziono takiej miejscowości.",
        "en": "No such place was found.",
    },
    "errors.calendarFailed": {
        "pl": "Nie udało się pobrać godzin wschodu i zachodu słońca.",
        "en": "Could not fetch sunrise and sunset times.",
    },
    "errors.missingCalendarData": {
        "pl": "Brak danych dziennych w odpowiedzi API.",
        "en": "The API response has no daily data.",
    },
    "errors.unknown": {
        "pl": "Wystąpił nieoczekiwany błąd. Spróbuj ponownie.",
        "en": "Something went wrong. Please try again.",
    },
    # Banners
    "banner.success": {
        "pl": "Pokazuję dane dla: {name}{country} (strefa czasowa: {timezone})",
        "en": "Showing data for: {name}{country} (time zone: {timezone})",
    },
    # Today section
    "today.label": {
        "pl": "Dzisiaj",
        "en": "Today",
    },
    "today.meta": {
        "pl": "Teraz jest {light}. Długość dnia: {length}.",
        "en": "It is {light} now. Day length: {length}.",
    },
    "today.daylight": {
        "pl": "dzień",
        "en": "daytime",
    },
    "today.night": {
        "pl": "noc",
        "en": "night",
    },
    "today.badge": {
        "pl": "dziś",
        "en": "today",
    },
    # Stats
    "stats.sunrise": {
        "pl": "Wschód",
        "en": "Sunrise",
    },
    "stats.sunset": {
        "pl": "Zachód",
        "en": "Sunset",
    },
    "stats.dayLength": {
        "pl": "Długość dnia",
        "en": "Day length",
    },
    "stats.nightLength": {
        "pl": "Długość nocy",
        "en": "Night length",
    },
    # Photography windows
    "photo.golden": {
        "pl": "Złota godzina",
        "en": "Golden hour",
    },
    "photo.blue": {
        "pl": "Niebieska godzina",
        "en": "Blue hour",
    },
    # Day cards
    "cards.daylight": {
        "pl": "Dzień: {value}",
        "en": "Day: {value}",
    },
    "cards.night": {
        "pl": "Noc: {value}",
        "en": "Night: {value}",
    },
    "days.range": {
        "pl": "Zakres: {past} dni wstecz i {future} dni do przodu",
        "en": "Range: {past} days back and {future} days ahead",
    },
    "days.pastTitle": {
        "pl": "Minione dni",
        "en": "Past days",
    },
    "days.futureTitle": {
        "pl": "Nadchodzące dni",
        "en": "Upcoming days",
    },
    "days.noPast": {
        "pl": "Brak danych z minionych dni.",
        "en": "No data for past days.",
    },
    # Comparison
    "compare.title": {
        "pl": "Porównanie",
        "en": "Comparison",
    },
    "compare.banner": {
        "pl": "Porównuję {base} z {other}",
        "en": "Comparing {base} with {other}",
    },
    "compare.empty": {
        "pl": "Brak wspólnych dni do porównania.",
        "en": "No shared days to compare.",
    },
    "compare.delta": {
        "pl": "Różnica: {value}",
        "en": "Difference: {value}",
    },
    "compare.base": {
        "pl": "{name}: {value}",
        "en": "{name}: {value}",
    },
    "compare.other": {
        "pl": "{name}: {value}",
        "en": "{name}: {value}",
    },
    "compare.longer": {
        "pl": "dłuższy dzień",
        "en": "longer day",
    },
    "compare.shorter": {
        "pl": "krótszy dzień",
        "en": "shorter day",
    },
}

_ERROR_KEYS: Dict[str, str] = {
    constants.GEOCODE_FAILED: "errors.geocodeFailed",
    constants.GEOCODE_EMPTY: "errors.geocodeEmpty",
    constants.CALENDAR_FAILED: "errors.calendarFailed",
    constants.MISSING_CALENDAR_DATA: "errors.missingCalendarData",
}

# Monday first, matching date.weekday()
WEEKDAYS: Dict[str, List[str]] = {
    "pl": [
        "poniedziałek", "wtorek", "środa", "czwartek",
        "piątek", "sobota", "niedziela",
    ],
    "en": [
        "Monday", "Tuesday", "Wednesday", "Thursday",
        "Friday", "Saturday", "Sunday",
    ],
}

# Polish day-month dates use the genitive form
MONTHS: Dict[str, List[str]] = {
    "pl": [
        "stycznia", "lutego", "marca", "kwietnia", "maja", "czerwca",
        "lipca", "sierpnia", "września", "października", "listopada", "grudnia",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}


def t(key: str, language: str = constants.DEFAULT_LANGUAGE, **kwargs) -> str:
    """Return the translated string for key, formatted with kwargs."""
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(language) or entry[constants.DEFAULT_LANGUAGE]
    return text.format(**kwargs) if kwargs else text


def error_message(code: str, language: str = constants.DEFAULT_LANGUAGE) -> str:
    """Map an error code to its user-facing message, generic when unmapped."""
    return t(_ERROR_KEYS.get(code, "errors.unknown"), language)
