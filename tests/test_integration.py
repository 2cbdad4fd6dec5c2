"""
Integration tests for the sun calendar application.

Runs the full search, comparison and rendering flow against a fake
Open-Meteo served through a patched requests session.
"""

import json
import sys
from datetime import datetime
from unittest.mock import Mock, patch

import pytest  # type: ignore
import pytz
import requests  # type: ignore

from conftest import make_response
from src.sun_calendar import main as main_module
from src.sun_calendar.main import SunCalendarApp

GEOCODE = {
    "Wrocław": {"results": [{
        "name": "Wrocław", "country": "Polska", "timezone": "Europe/Warsaw",
        "latitude": 51.1, "longitude": 17.03,
    }]},
    "Madryt": {"results": [{
        "name": "Madryt", "country": "Hiszpania", "timezone": "Europe/Madrid",
        "latitude": 40.42, "longitude": -3.7,
    }]},
}

FORECAST = {
    51.1: {"daily": {
        "time": ["2024-06-20", "2024-06-21", "2024-06-22"],
        "sunrise": ["2024-06-20T04:50", "2024-06-21T04:50", "2024-06-22T04:51"],
        "sunset": ["2024-06-20T21:09", "2024-06-21T21:10", "2024-06-22T21:10"],
    }},
    40.42: {"daily": {
        "time": ["2024-06-20", "2024-06-21"],
        "sunrise": ["2024-06-20T06:44", "2024-06-21T06:44"],
        "sunset": ["2024-06-20T21:47", "2024-06-21T21:48"],
    }},
}

# 12:00 in Warsaw
NOW = pytz.UTC.localize(datetime(2024, 6, 21, 10, 0))


def fake_open_meteo(**kwargs):
    params = kwargs["params"]
    if kwargs["url"].endswith("/search"):
        return make_response(GEOCODE.get(params["name"], {"results": []}))
    if kwargs["url"].endswith("/forecast"):
        return make_response(FORECAST[params["latitude"]])
    return make_response(error=requests.exceptions.HTTPError("404 Not Found"))


@pytest.fixture
def app(tmp_path, monkeypatch):
    for name in ["CONFIG_FILE", "SUN_CALENDAR_LANGUAGE", "GEOCODING_URL", "FORECAST_URL"]:
        monkeypatch.delenv(name, raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"calendar": {"past_days": 1, "future_days": 1}}), encoding="utf-8")
    return SunCalendarApp(config_file=str(config_file), logger=Mock())


@pytest.mark.integration
class TestSunCalendarApp:

    def test_full_report(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            exit_code = app.run("Wrocław", now=NOW)

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Pokazuję dane dla: Wrocław, Polska (strefa czasowa: Europe/Warsaw)" in output
        assert "Dzisiaj: piątek, 21 czerwca" in output
        assert "Teraz jest dzień. Długość dnia: 16 h 20 min." in output
        assert "Długość nocy: 7 h 40 min" in output
        assert "Złota godzina: 04:50 – 05:50 / 20:10 – 21:10" in output
        assert "Niebieska godzina: 03:50 – 04:50 / 21:10 – 22:10" in output
        assert "Zakres: 1 dni wstecz i 1 dni do przodu" in output
        assert "czwartek, 20 czerwca" in output
        assert "piątek, 21 czerwca [dziś]" in output
        assert "sobota, 22 czerwca" in output
        assert "Porównanie" not in output

    def test_comparison(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            exit_code = app.run("Wrocław", compare_query="Madryt", now=NOW)

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Porównuję Wrocław z Madryt" in output
        # Only today and later, present in both calendars: 904 - 980 = -76
        assert "Różnica: 1 h 16 min (Madryt: krótszy dzień)" in output
        assert "Wrocław: 16 h 20 min" in output
        assert "Madryt: 15 h 04 min" in output
        assert output.count("Różnica:") == 1

    def test_comparison_failure_keeps_primary(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            exit_code = app.run("Wrocław", compare_query="Atlantyda", now=NOW)

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Dzisiaj: piątek, 21 czerwca" in output
        assert "! Nie znaleziono takiej miejscowości." in output

    def test_primary_failure(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            exit_code = app.run("Atlantyda", now=NOW)

        output = capsys.readouterr().out
        assert exit_code == 1
        assert output.strip() == "! Nie znaleziono takiej miejscowości."

    def test_network_failure(self, app, capsys):
        with patch.object(
            requests.Session, "request",
            side_effect=requests.exceptions.ConnectionError("offline")
        ):
            exit_code = app.run("Wrocław", now=NOW)

        assert exit_code == 1
        assert "Błąd geokodowania lokalizacji." in capsys.readouterr().out

    def test_default_city(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            app.run(now=NOW)

        assert "Wrocław" in capsys.readouterr().out

    def test_night_and_english(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("SUN_CALENDAR_LANGUAGE", raising=False)
        config_file = tmp_path / "config.json"
        config_file.write_text("{}", encoding="utf-8")
        app = SunCalendarApp(config_file=str(config_file), language="en", logger=Mock())
        late = pytz.UTC.localize(datetime(2024, 6, 21, 20, 0))  # 22:00 in Warsaw

        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            app.run("Wrocław", now=late)

        output = capsys.readouterr().out
        assert "Today: Friday, June 21" in output
        assert "It is night now." in output
        assert "Sunrise: 04:50 AM" in output

    def test_latest_result_stored_in_slots(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            app.run("Wrocław", compare_query="Madryt", now=NOW)

        assert app.primary_slot.value.location.name == "Wrocław"
        assert app.comparison_slot.value.location.name == "Madryt"

    def test_render_requires_initialization(self, app):
        with pytest.raises(RuntimeError):
            app.render(Mock())

    def test_pipelines_use_separate_sessions(self, app):
        app.initialize_components()

        assert app.api_client is not app.comparison_api_client
        assert app.api_client.session is not app.comparison_api_client.session
        assert app.service.api_client is app.api_client
        assert app.comparison_service.api_client is app.comparison_api_client

    def test_concurrent_searches_stay_on_their_own_session(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            app.run("Wrocław", now=NOW)

        # With a base location in place both pipelines run side by side
        app.initialize_components()
        app.api_client.session.request = Mock(side_effect=fake_open_meteo)
        app.comparison_api_client.session.request = Mock(side_effect=fake_open_meteo)

        primary, other = app.search("Wrocław", "Madryt")

        assert primary.ok and other.ok
        primary_names = [
            c.kwargs["params"].get("name") for c in app.api_client.session.request.call_args_list
        ]
        other_names = [
            c.kwargs["params"].get("name")
            for c in app.comparison_api_client.session.request.call_args_list
        ]
        assert primary_names == ["Wrocław", None]
        assert other_names == ["Madryt", None]

    def test_run_closes_both_clients(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo), \
                patch.object(requests.Session, "close") as close:
            app.run("Wrocław", compare_query="Madryt", now=NOW)

        assert close.call_count == 2

    def test_primary_failure_skips_comparison(self, app, capsys):
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo) as request:
            exit_code = app.run("Atlantyda", compare_query="Madryt", now=NOW)

        assert exit_code == 1
        assert [c.kwargs["params"]["name"] for c in request.call_args_list] == ["Atlantyda"]
        assert app.comparison_slot.value is None
        assert capsys.readouterr().out.strip() == "! Nie znaleziono takiej miejscowości."

    def test_highlight_follows_place_timezone(self, app, capsys):
        # 22:30 UTC is already 22 June in Warsaw
        late = pytz.UTC.localize(datetime(2024, 6, 21, 22, 30))

        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            app.run("Wrocław", now=late)

        output = capsys.readouterr().out
        assert "sobota, 22 czerwca [dziś]" in output
        assert "piątek, 21 czerwca [dziś]" not in output

    def test_day_cards_highlight_through_is_today(self, app):
        app.initialize_components()
        location = Mock(timezone="Europe/Warsaw")
        with patch.object(requests.Session, "request", side_effect=fake_open_meteo):
            result = app.service.search("Wrocław")

        with patch.object(app.time_utils, "is_today", wraps=app.time_utils.is_today) as is_today:
            output = app.renderer.render_days(location, result.days, "2024-06-21", 1, 1, NOW)

        is_today.assert_any_call("2024-06-21", "Europe/Warsaw", NOW)
        assert output.count("[dziś]") == 1


class TestCommandLine:

    def test_main_passes_arguments(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", [
            "sun-calendar", "Gdańsk", "--compare", "Oslo",
            "--past", "2", "--future", "5", "--language", "en",
        ])
        with patch.object(main_module, "SunCalendarApp") as app_cls:
            app_cls.return_value.run.return_value = 0
            with pytest.raises(SystemExit) as excinfo:
                main_module.main()

        assert excinfo.value.code == 0
        app_cls.assert_called_once_with(
            config_file=None, language="en", past_days=2, future_days=5, log_level=None
        )
        app_cls.return_value.run.assert_called_once_with(query="Gdańsk", compare_query="Oslo")

    def test_main_reports_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["sun-calendar"])
        with patch.object(main_module, "SunCalendarApp", side_effect=ValueError("bad config")):
            with pytest.raises(SystemExit) as excinfo:
                main_module.main()

        assert excinfo.value.code == 1
        assert "Application failed: bad config" in capsys.readouterr().out
