"""Shared fixtures for validator tests."""

import logging

import pytest
import structlog

from input_validator.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache around every test so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_failures(monkeypatch):
    """Enable the opt-in validation_failed debug events."""
    monkeypatch.setenv("INPUT_VALIDATOR_LOG_VALIDATION_FAILURES", "true")
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects on structlog and the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
