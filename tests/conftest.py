"""
Pytest configuration and shared fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Make the package importable from a source checkout
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from location_export.models import Location  # noqa: E402

ENV_VARS = (
    "CONFIG_FILE",
    "LOCATIONS_API_BASE_URL",
    "LOCATIONS_API_TIMEOUT",
    "LOCATIONS_OUTPUT_FILE",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def berlin_payload(fixtures_dir):
    """Raw API response for the city name Berlin."""
    with open(fixtures_dir / "berlin.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_locations():
    """Locations without characters that need quoting."""
    return [
        Location(id=376217, name="Berlin", type="location", latitude=52.52437, longitude=13.41053),
        Location(id=425332, name="Berlin Tegel", type="airport", latitude=52.5548, longitude=13.28903),
    ]
