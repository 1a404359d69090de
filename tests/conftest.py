"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides a jazz-discography environment and accessors reading from it
"""

import os
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from envlookup import TypedEnvAccessor

MISSING_VARS = [
    "EMPTY_JAZZ_ARTIST",
    "EMPTY_RECORD_LABELS",
    "EMPTY_NO_OF_STUDIO_ALBUMS",
    "EMPTY_PLAYED_WITH_MILES_DAVIES",
    "EMPTY_LONGEST_RECORDED_TRACK",
    "EMPTY_LONGEST_RECORDED_TRACK_FLOAT",
    "PANIC_PLEASE",
]


@pytest.fixture
def mock_console():
    """Provide a mock Rich console for testing."""
    return MagicMock(spec=Console)


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "JAZZ_ARTIST": "John Coltrane",
        "PLAYED_WITH_MILES_DAVIES": "true",
        "NO_OF_STUDIO_ALBUMS": "51",
        "RECORD_LABELS": "Impulse!,Atlantic,Prestige,Blue Note",
        "LONGEST_RECORDED_TRACK": "27m32s",
        "LONGEST_RECORDED_TRACK_FLOAT": "27.32",
        "CATALOG_NUMBER": "0x1F",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Set the test variables in os.environ and make sure the missing ones are unset."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        for name in MISSING_VARS:
            os.environ.pop(name, None)
        yield test_env_vars


@pytest.fixture
def accessor(test_env_vars):
    """Provide a TypedEnvAccessor reading from a private copy of the test variables."""
    return TypedEnvAccessor(dict(test_env_vars))
