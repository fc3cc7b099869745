"""
Pytest configuration and fixtures for Person Registry tests
"""

import pytest

from person_registry.core.builder import PersonBuilder
from person_registry.core.registry import PersonRegistry


FOUNDERS_TEXT = "Elon Musk, 45, Tesla\nMark Zuckerberg, 32, Facebook\nMartha Stewart, 74, MSL"


@pytest.fixture
def registry():
    """Create an empty registry for testing"""
    return PersonRegistry()


@pytest.fixture
def builder(registry):
    """Create a builder that raises on malformed records"""
    return PersonBuilder(registry, trim=True, policy="raise")


@pytest.fixture
def founders_text():
    """Three well-formed records"""
    return FOUNDERS_TEXT


@pytest.fixture
def founders_file(tmp_path):
    """Write the three records to a temporary file"""
    path = tmp_path / "people.txt"
    path.write_text(FOUNDERS_TEXT + "\n", encoding="utf-8")
    return path
