# tests/conftest.py
"""
Pytest configuration and fixtures for featuretour tests.
"""

import logging

import pytest

from featuretour import Person, TourConfig


@pytest.fixture(autouse=True)
def reset_person_counter():
    """Automatically restore the default-name counter around each test."""
    saved = Person.cnt
    Person.cnt = 0

    yield

    Person.cnt = saved


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Drop handlers bound to captured streams and restore the level."""
    logger = logging.getLogger("featuretour")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)

    yield

    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


@pytest.fixture
def quick_config():
    """Config that keeps the parallel sort small and skips the zone id dump."""
    return TourConfig(parallel_sort_size=2_000, workers=2, show_all_zones=False)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
