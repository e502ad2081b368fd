"""Shared test fixtures for aumai-testdatagen."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from aumai_testdatagen.core import DataGenerator, RecordGenerator
from aumai_testdatagen.models import DataTemplate
from aumai_testdatagen.primitives import ValueGenerator
from aumai_testdatagen.prng import SeededRandom
from aumai_testdatagen.templates import USER_TEMPLATE

REFERENCE_TIME = datetime(2026, 6, 15, tzinfo=timezone.utc)


@pytest.fixture()
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture()
def rng() -> SeededRandom:
    return SeededRandom(42)


@pytest.fixture()
def values(rng: SeededRandom, reference_time: datetime) -> ValueGenerator:
    return ValueGenerator(rng, reference_time)


@pytest.fixture()
def walker(values: ValueGenerator) -> RecordGenerator:
    return RecordGenerator(values)


@pytest.fixture()
def generator() -> DataGenerator:
    return DataGenerator(seed=12345, reference_time=REFERENCE_TIME)


@pytest.fixture()
def user_template() -> DataTemplate:
    return DataTemplate.model_validate(USER_TEMPLATE)


@pytest.fixture()
def nested_template() -> DataTemplate:
    return DataTemplate.model_validate(
        {
            "schema": {
                "name": "string",
                "score": "number",
                "owner": {"name": "string", "contact": {"email": "email"}},
                "tags": ["string"],
                "history": [{"score": "number", "when": "date"}],
            },
            "constraints": {"score": {"min": 10, "max": 20}},
            "data": {"name": ["alpha", "beta", "gamma"], "tags": ["red", "green"]},
        }
    )
