"""Fluent builder for hand-assembled request payloads in tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from faker import Faker


def _make_faker(faker: Faker | None, seed: int | None) -> Faker:
    faker = faker if faker is not None else Faker()
    if seed is not None:
        faker.seed_instance(seed)
    return faker


class RecordBuilder:
    """Accumulate field values and build a plain dict.

    Use the factories for common payloads and override what the test cares
    about::

        payload = RecordBuilder.user(seed=1).with_field("age", 30).build()
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    @classmethod
    def user(cls, faker: Faker | None = None, seed: int | None = None) -> RecordBuilder:
        faker = _make_faker(faker, seed)
        return cls().with_defaults(
            {
                "name": f"Test User {faker.pystr(min_chars=5, max_chars=5)}",
                "email": faker.email(),
                "age": faker.random_int(min=18, max=65),
            }
        )

    @classmethod
    def post(cls, faker: Faker | None = None, seed: int | None = None) -> RecordBuilder:
        faker = _make_faker(faker, seed)
        return cls().with_defaults(
            {
                "title": f"Test Post {faker.sentence(nb_words=4).rstrip('.')}",
                "body": faker.paragraph(nb_sentences=3),
                "userId": faker.random_int(min=1, max=10),
            }
        )

    def with_defaults(self, defaults: Mapping[str, Any]) -> RecordBuilder:
        self._data = {**self._data, **defaults}
        return self

    def with_field(self, name: str, value: Any) -> RecordBuilder:  # noqa: ANN401
        self._data[name] = value
        return self

    def with_fields(self, fields: Mapping[str, Any]) -> RecordBuilder:
        self._data = {**self._data, **fields}
        return self

    def build(self) -> dict[str, Any]:
        """Return a copy, so later overrides never leak into built payloads."""
        return dict(self._data)


__all__ = ["RecordBuilder"]
