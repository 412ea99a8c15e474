"""Shared pytest fixtures for the test suite."""

import pytest
from datetime import datetime, timezone

from sales_core.domain.value_objects import Currency
from sales_core.infrastructure.id_generator import SequentialIdGenerator
from sales_core.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """A deterministic id generator producing id-1, id-2, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def usd() -> Currency:
    return Currency(code="USD")


@pytest.fixture
def pen() -> Currency:
    return Currency(code="PEN")
