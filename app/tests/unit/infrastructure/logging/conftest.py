"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog

from infrastructure.configuration import Settings


@pytest.fixture
def dev_settings(language_settings):
    """Non-production settings with debug logging."""
    return Settings(PREFIX="dev-", LOG_LEVEL="DEBUG", language=language_settings)


@pytest.fixture(autouse=True)
def clean_contextvars():
    """Keep bound context from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
