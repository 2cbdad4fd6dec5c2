"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def geocode_response(fixtures_dir):
    """Geocoding API response for Wrocław."""
    with open(fixtures_dir / "geocode_wroclaw.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def forecast_response(fixtures_dir):
    """Forecast API daily sunrise/sunset response for Wrocław."""
    with open(fixtures_dir / "forecast_wroclaw.json", encoding="utf-8") as f:
        return json.load(f)


def make_response(payload=None, error=None):
    """Build a mock requests.Response returning payload or raising on status."""
    response = Mock()
    response.json.return_value = payload
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test exercising the full pipeline"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
