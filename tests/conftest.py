"""
Pytest configuration and fixtures.

Provides reusable test fixtures for all test modules.
"""

import logging
from enum import Enum

import pytest

from argguard.config import get_guard_settings, get_settings


class Color(Enum):
    """Enum used as a guard subject in tests."""

    RED = 1
    GREEN = 2
    BLUE = 3


@pytest.fixture
def color_enum():
    """
    Sample enum type.

    Returns:
        type: Color enum with RED, GREEN, BLUE
    """
    return Color


@pytest.fixture
def existing_file(tmp_path):
    """
    A regular file on disk.

    Returns:
        str: Path to the file
    """
    path = tmp_path / "settings.json"
    path.write_text("{}")
    return str(path)


@pytest.fixture
def fresh_settings():
    """
    Clear the cached settings before and after the test.

    Use together with patch.dict("os.environ", ...) so settings are re-read.
    """
    get_settings.cache_clear()
    get_guard_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_guard_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
