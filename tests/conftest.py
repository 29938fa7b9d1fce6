"""Shared test configuration for datepick."""

import logging
from datetime import date
from typing import Iterator

import pytest

from datepick.settings.models import DisplayConfig

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Leave the ``datepick`` logger as the test found it."""
    logger = logging.getLogger("datepick")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def today() -> date:
    """Fixed 'today' (a Friday) used across tests."""
    return FIXED_TODAY


@pytest.fixture
def today_provider(today: date):
    return lambda: today


@pytest.fixture
def display_config() -> DisplayConfig:
    """Default display configuration."""
    return DisplayConfig()
