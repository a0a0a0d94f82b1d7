"""
Pytest configuration and shared fixtures for all tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import hydrowatch
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("APP_ENV", "test")

from hydrowatch.core.models import Place  # noqa: E402
from hydrowatch.core.store import MappingStorage  # noqa: E402


@pytest.fixture
def chennai():
    return Place(
        description="Chennai, Tamil Nadu, India",
        place_id="ChIJYTN9T-plUjoRM9RjaAunYW4",
        lat=13.0827,
        lng=80.2707,
        formatted_address="Chennai, Tamil Nadu, India",
        name="Chennai",
    )


@pytest.fixture
def pune():
    return Place(
        description="Pune, Maharashtra, India",
        place_id="ChIJARFGZy6_wjsRQ-Oenb9DjYI",
        lat=18.5204,
        lng=73.8567,
        formatted_address="Pune, Maharashtra, India",
        name="Pune",
    )


@pytest.fixture
def memory_storage():
    return MappingStorage({})


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
