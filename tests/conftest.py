"""Root conftest — shared test configuration and logging isolation."""

import logging
import os

import pytest

from user_api.config import get_settings

# Ensure tests never pick up a developer's logging setup
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging mutates the root logger; put it back after every test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
