"""Primitive value generators: one scalar value per call, drawn from a SeededRandom."""

from __future__ import annotations

import math
from datetime import MINYEAR, datetime, timedelta, timezone
from typing import Any

from aumai_testdatagen.models import FieldConstraints, FieldType
from aumai_testdatagen.prng import SeededRandom

# ---------------------------------------------------------------------------
# Fixed pools
# ---------------------------------------------------------------------------

EMAIL_DOMAINS = ["gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "company.com"]
EMAIL_FIRST_NAMES = ["john", "jane", "mike", "sarah", "david", "emily", "chris", "lisa"]
EMAIL_LAST_NAMES = ["smith", "johnson", "williams", "brown", "jones", "garcia", "miller"]

URL_PROTOCOLS = ["https://", "http://"]
URL_DOMAINS = ["example.com", "test.com", "demo.org", "sample.net"]
URL_PATHS = ["", "/page", "/product", "/user", "/api", "/docs"]

LOREM_WORDS = ["lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit"]

VARIATION_SUFFIXES = ["_test", "_demo", "_sample", "_v2", "_new"]

DIGITS = "0123456789"
UNKNOWN_ENUM_VALUE = "unknown"


def default_reference_time() -> datetime:
    """Return midnight UTC of the current day."""
    return datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


def _or_default(value: Any, default: Any) -> Any:  # noqa: ANN401
    return default if value is None else value


# ---------------------------------------------------------------------------
# ValueGenerator
# ---------------------------------------------------------------------------


class ValueGenerator:
    """Produce scalar values for each primitive :class:`FieldType`.

    Every draw goes through the supplied :class:`SeededRandom`, so the
    sequence of values is fully determined by its seed and the order of
    calls.  ``reference_time`` anchors the ``date`` and ``datetime`` types.
    """

    def __init__(self, rng: SeededRandom, reference_time: datetime | None = None) -> None:
        self._rng = rng
        self._reference_time = reference_time or default_reference_time()
        if self._reference_time.tzinfo is None:
            self._reference_time = self._reference_time.replace(tzinfo=timezone.utc)

    @property
    def rng(self) -> SeededRandom:
        return self._rng

    @property
    def reference_time(self) -> datetime:
        return self._reference_time

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def generate(
        self,
        field_type: FieldType,
        constraints: FieldConstraints,
        enum_values: list[str] | None = None,
        pool: list[Any] | None = None,
        variations: bool = True,
    ) -> Any:  # noqa: ANN401
        """Return one value of *field_type*."""
        if field_type == FieldType.string:
            return self.string(constraints, pool, variations)
        if field_type == FieldType.number:
            return self.number(constraints)
        if field_type == FieldType.boolean:
            return self._rng.random_boolean()
        if field_type == FieldType.email:
            return self.email()
        if field_type == FieldType.phone:
            return self.phone(constraints)
        if field_type == FieldType.date:
            return self.iso_date(constraints)
        if field_type == FieldType.datetime:
            return self.iso_datetime()
        if field_type == FieldType.url:
            return self.url()
        if field_type == FieldType.text:
            return self.text(constraints, pool)
        return self.enum(enum_values)

    def fallback(
        self,
        constraints: FieldConstraints,
        enum_values: list[str] | None = None,
        pool: list[Any] | None = None,
        variations: bool = True,
    ) -> Any:  # noqa: ANN401
        """Value for an unrecognised type tag: enum if the field has one, else string."""
        if enum_values is not None:
            return self.enum(enum_values)
        return self.string(constraints, pool, variations)

    # ------------------------------------------------------------------
    # Per-type generators
    # ------------------------------------------------------------------

    def string(
        self,
        constraints: FieldConstraints,
        pool: list[Any] | None = None,
        variations: bool = True,
    ) -> Any:  # noqa: ANN401
        if pool:
            value = self._rng.random_choice(pool)
            return self.vary(value) if variations else value
        min_length = _or_default(constraints.min_length, 3)
        max_length = _or_default(constraints.max_length, 20)
        return self._rng.random_string(self._rng.random_int(min_length, max_length))

    def number(self, constraints: FieldConstraints) -> int | float:
        minimum = _or_default(constraints.min, 0)
        maximum = _or_default(constraints.max, 100)
        decimal = _or_default(constraints.decimal, 0)
        value = self._rng.next() * (maximum - minimum) + minimum
        if decimal > 0:
            return round(value, decimal)
        return math.floor(value)

    def email(self) -> str:
        first_name = self._rng.random_choice(EMAIL_FIRST_NAMES)
        last_name = self._rng.random_choice(EMAIL_LAST_NAMES)
        domain = self._rng.random_choice(EMAIL_DOMAINS)
        number = self._rng.random_int(1, 999)
        return f"{first_name}.{last_name}{number}@{domain}"

    def phone(self, constraints: FieldConstraints) -> str:
        if _or_default(constraints.format, "us") == "us":
            area_code = self._rng.random_int(200, 999)
            exchange = self._rng.random_int(200, 999)
            line = self._rng.random_int(1000, 9999)
            return f"({area_code}) {exchange}-{line}"
        return self._rng.random_string(10, DIGITS)

    def iso_date(self, constraints: FieldConstraints) -> str:
        """A ``YYYY-MM-DD`` date between ``maxAge`` and ``minAge`` years ago."""
        min_age = _or_default(constraints.min_age, 0)
        max_age = _or_default(constraints.max_age, 100)
        year = self._reference_time.year
        earliest = datetime(max(MINYEAR, year - max_age), 1, 1)
        latest = datetime(max(MINYEAR, year - min_age), 12, 31)
        moment = earliest + (latest - earliest) * self._rng.next()
        return moment.date().isoformat()

    def iso_datetime(self) -> str:
        """An ISO-8601 UTC timestamp from one year ago to 30 days ahead."""
        past = self._reference_time - timedelta(days=365)
        future = self._reference_time + timedelta(days=30)
        moment = past + (future - past) * self._rng.next()
        return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )

    def url(self) -> str:
        protocol = self._rng.random_choice(URL_PROTOCOLS)
        domain = self._rng.random_choice(URL_DOMAINS)
        path = self._rng.random_choice(URL_PATHS)
        return f"{protocol}{domain}{path}"

    def text(self, constraints: FieldConstraints, pool: list[Any] | None = None) -> Any:  # noqa: ANN401
        if pool:
            return self._rng.random_choice(pool)
        min_length = _or_default(constraints.min_length, 50)
        max_length = _or_default(constraints.max_length, 500)
        target = self._rng.random_int(min_length, max_length)

        sentences: list[str] = []
        current_length = 0
        while current_length < target:
            word_count = self._rng.random_int(5, 15)
            sentence = " ".join(self._rng.random_choice(LOREM_WORDS) for _ in range(word_count))
            sentences.append(sentence[0].upper() + sentence[1:] + ".")
            current_length += len(sentence) + 1
        return " ".join(sentences)

    def enum(self, enum_values: list[str] | None) -> str:
        if not enum_values:
            return UNKNOWN_ENUM_VALUE
        return self._rng.random_choice(enum_values)

    # ------------------------------------------------------------------
    # Variations
    # ------------------------------------------------------------------

    def vary(self, value: Any) -> Any:  # noqa: ANN401
        """Maybe append a number or a suffix to a pooled value.

        The two checks draw independently, so the suffix branch fires with
        probability 0.7 * 0.2 and the value is left alone 56% of the time.
        """
        if self._rng.next() < 0.3:
            return f"{value}{self._rng.random_int(1, 999)}"
        if self._rng.next() < 0.2:
            return f"{value}{self._rng.random_choice(VARIATION_SUFFIXES)}"
        return value


__all__ = ["ValueGenerator", "default_reference_time"]
