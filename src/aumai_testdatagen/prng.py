"""Seeded linear congruential generator used for reproducible fixtures.

This is NOT a cryptographically secure source of randomness and must never
be used for secrets.  It exists so that the same seed always yields the
same test data.
"""

from __future__ import annotations

import math
import secrets
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280

DEFAULT_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


def derive_seed() -> int:
    """Return a seed drawn from system entropy."""
    return secrets.randbelow(1_000_000)


class SeededRandom:
    """Deterministic pseudo-random source parameterized by an integer seed."""

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._state = self._seed

    @classmethod
    def from_state(cls, state: int) -> SeededRandom:
        """Resume a sequence from a previously captured :attr:`state`."""
        return cls(state)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the generator and return a float in ``[0, 1)``."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._state / _MODULUS

    def random_int(self, minimum: int, maximum: int) -> int:
        """Return an integer in ``[minimum, maximum]``, inclusive on both ends."""
        return math.floor(self.next() * (maximum - minimum + 1)) + minimum

    def random_choice(self, options: Sequence[T]) -> T:
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        return options[math.floor(self.next() * len(options))]

    def random_boolean(self) -> bool:
        return self.next() < 0.5

    def random_string(self, length: int, charset: str = DEFAULT_CHARSET) -> str:
        if not charset:
            raise IndexError("Cannot build a string from an empty charset")
        return "".join(
            charset[math.floor(self.next() * len(charset))] for _ in range(length)
        )


__all__ = ["DEFAULT_CHARSET", "SeededRandom", "derive_seed"]
