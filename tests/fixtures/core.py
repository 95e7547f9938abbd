from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

import pytest

from src.app.entities import ComparablePerson
from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import with_context

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> Generator[ConfigData, None, None]:
    """Pin the reference clock for the duration of a test."""
    override = ConfigData()
    override.features.fixed_now = fixed_now
    with with_context(override):
        yield override


@pytest.fixture
def persons(fixed_now: datetime) -> list[ComparablePerson]:
    return [
        ComparablePerson(first_name="Ada", last_name="Lovelace", hire_date=datetime(2023, 12, 16, tzinfo=UTC)),
        ComparablePerson(first_name="Alan", last_name="Turing", hire_date=datetime(2024, 1, 5, tzinfo=UTC)),
        ComparablePerson(first_name="Grace", last_name="Hopper", hire_date=datetime(2023, 12, 26, tzinfo=UTC)),
        ComparablePerson(first_name="Annie", last_name="Hopper", hire_date=fixed_now),
    ]


@pytest.fixture
def words() -> list[str]:
    return ["pear", "fig", "banana", "apple", "fig", "kiwi", "apple"]
