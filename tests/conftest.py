"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import os
from datetime import datetime, timedelta, timezone, tzinfo

import pytest

import ymdflag.core.config as config_module


@pytest.fixture
def fixed_clock():
    """Clock returning 2023-07-04 23:30 UTC, converted to the requested zone."""
    instant = datetime(2023, 7, 4, 23, 30, tzinfo=timezone.utc)

    def clock(location: tzinfo | None) -> datetime:
        if location is None:
            return instant.astimezone()
        return instant.astimezone(location)

    return clock


@pytest.fixture
def plus_one_hour() -> tzinfo:
    """Fixed UTC+01:00 zone that needs no time zone database."""
    return timezone(timedelta(hours=1), "UTC+01:00")


@pytest.fixture
def ymd_test_cases() -> list[dict]:
    """Valid YYYYMMDD values with their fields."""
    return [
        {"ymd": 20220101, "text": "20220101", "fields": (2022, 1, 1)},
        {"ymd": 20240229, "text": "20240229", "fields": (2024, 2, 29)},
        {"ymd": 19991231, "text": "19991231", "fields": (1999, 12, 31)},
        {"ymd": 10101, "text": "00010101", "fields": (1, 1, 1)},
        {"ymd": 99991231, "text": "99991231", "fields": (9999, 12, 31)},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("YMDFLAG_ENV", "test")
    monkeypatch.setenv("YMDFLAG_TIMEZONE", "UTC")
    monkeypatch.setenv("YMDFLAG_PATH_SEPARATOR", os.sep)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEBUG", "false")

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for command line behavior"
    )
    config.addinivalue_line(
        "markers", "timezone: Tests that depend on the IANA time zone database"
    )
