"""Shared fixtures for the date-operations test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from date_operations.domain.value_objects.custom_date import CustomDate
from date_operations.shared.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from cached settings and stray environment."""
    for var in ("DEMO_DAY", "DEMO_MONTH", "DEMO_YEAR", "DEMO_OFFSET_DAYS", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def demo_date() -> CustomDate:
    """Return 07/12/2022, the date used by the demonstration run."""
    return CustomDate(7, 12, 2022)


@pytest.fixture
def leap_day() -> CustomDate:
    """Return 29/02/2020."""
    return CustomDate(29, 2, 2020)
