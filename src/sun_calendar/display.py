"""
Plain-text rendering of sun calendar results.

Produces the status banner, the today section, past/upcoming day cards
and the comparison rows.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .algorithms import ComparisonEngine, PhotoWindowCalculator
from .core import constants
from .core.messages import t
from .core.time_utils import TimeZoneUtils
from .models import ComparisonRow, LocationResult, SunDay
from .services import SearchResult


class CalendarRenderer:
    """Renders search results as text blocks."""

    def __init__(
        self,
        time_utils: TimeZoneUtils,
        photo_calc: Optional[PhotoWindowCalculator] = None,
        language: str = constants.DEFAULT_LANGUAGE,
        logger: Optional[logging.Logger] = None
    ):
        self.time_utils = time_utils
        self.photo_calc = photo_calc or PhotoWindowCalculator(logger=logger)
        self.language = language
        self.logger = logger or logging.getLogger(__name__)

    def _t(self, key: str, **kwargs) -> str:
        return t(key, self.language, **kwargs)

    def render_banner(self, result: SearchResult) -> str:
        if not result.ok:
            return f"! {result.error_message}"
        location = result.location
        return self._t(
            "banner.success",
            name=location.name,
            country=f", {location.country}" if location.country else "",
            timezone=location.timezone,
        )

    def render_today(
        self,
        location: LocationResult,
        day: SunDay,
        now: Optional[datetime] = None
    ) -> str:
        tz = location.timezone
        tu = self.time_utils
        windows = self.photo_calc.photo_windows(day, tz)
        light = "today.daylight" if tu.is_daylight_now(day, tz, now) else "today.night"

        lines = [
            f"== {self._t('today.label')}: {tu.format_date(day.date, tz)} ==",
            self._t(
                "today.meta",
                light=self._t(light),
                length=tu.format_duration(day.day_length_minutes),
            ),
            f"  {self._t('stats.sunrise')}: {tu.format_time(day.sunrise, tz)}",
            f"  {self._t('stats.sunset')}: {tu.format_time(day.sunset, tz)}",
            f"  {self._t('stats.dayLength')}: {tu.format_duration(day.day_length_minutes)}",
            f"  {self._t('stats.nightLength')}: {tu.format_duration(day.night_length_minutes)}",
            f"  {self._t('photo.golden')}: "
            f"{tu.format_dual_window(windows.morning_golden, windows.evening_golden, tz)}",
            f"  {self._t('photo.blue')}: "
            f"{tu.format_dual_window(windows.morning_blue, windows.evening_blue, tz)}",
        ]
        return "\n".join(lines)

    def render_day_card(self, day: SunDay, timezone_str: str, highlight: bool = False) -> str:
        tu = self.time_utils
        windows = self.photo_calc.photo_windows(day, timezone_str)
        badge = f" [{self._t('today.badge')}]" if highlight else ""

        lines = [
            f"- {tu.format_date(day.date, timezone_str)}{badge}",
            f"    {tu.format_time(day.sunrise, timezone_str)} — {tu.format_time(day.sunset, timezone_str)}",
            f"    {self._t('cards.daylight', value=tu.format_duration(day.day_length_minutes))}"
            f", {self._t('cards.night', value=tu.format_duration(day.night_length_minutes))}",
            f"    {self._t('photo.golden')}: "
            f"{tu.format_dual_window(windows.morning_golden, windows.evening_golden, timezone_str)}",
            f"    {self._t('photo.blue')}: "
            f"{tu.format_dual_window(windows.morning_blue, windows.evening_blue, timezone_str)}",
        ]
        return "\n".join(lines)

    def render_days(
        self,
        location: LocationResult,
        days: List[SunDay],
        current_date: str,
        past_range: int,
        future_range: int,
        now: Optional[datetime] = None
    ) -> str:
        tz = location.timezone
        past, upcoming = ComparisonEngine.split_days(days, current_date)

        lines = [self._t("days.range", past=past_range, future=future_range), ""]

        lines.append(f"== {self._t('days.pastTitle')} ==")
        if not past:
            lines.append(self._t("days.noPast"))
        lines.extend(self.render_day_card(day, tz) for day in past)

        lines.append("")
        lines.append(f"== {self._t('days.futureTitle')} ==")
        lines.extend(
            self.render_day_card(day, tz, highlight=self.time_utils.is_today(day.date, tz, now))
            for day in upcoming
        )
        return "\n".join(lines)

    def render_comparison(
        self,
        base: LocationResult,
        other: LocationResult,
        rows: List[ComparisonRow]
    ) -> str:
        tu = self.time_utils
        lines = [
            f"== {self._t('compare.title')} ==",
            self._t("compare.banner", base=base.name, other=other.name),
        ]
        if not rows:
            lines.append(self._t("compare.empty"))

        for row in rows:
            trend = "compare.longer" if row.delta >= 0 else "compare.shorter"
            lines.extend([
                f"- {tu.format_date(row.date, base.timezone)}: "
                f"{self._t('compare.delta', value=tu.format_duration(abs(row.delta)))} "
                f"({other.name}: {self._t(trend)})",
                f"    {self._t('compare.base', name=base.name, value=tu.format_duration(row.base.day_length_minutes))}",
                f"    {self._t('compare.other', name=other.name, value=tu.format_duration(row.other.day_length_minutes))}",
            ])
        return "\n".join(lines)
