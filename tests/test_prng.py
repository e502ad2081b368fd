"""Tests for the seeded linear congruential generator."""
from __future__ import annotations

import pytest

from aumai_testdatagen.prng import DEFAULT_CHARSET, SeededRandom, derive_seed


class TestSeededRandom:
    def test_first_values_follow_lcg(self) -> None:
        rng = SeededRandom(0)
        assert rng.next() == 49297 / 233280
        assert rng.state == 49297
        assert rng.next() == 165494 / 233280
        assert rng.state == 165494

    def test_values_in_unit_interval(self, rng: SeededRandom) -> None:
        for _ in range(1000):
            value = rng.next()
            assert 0 <= value < 1

    def test_same_seed_same_sequence(self) -> None:
        a = SeededRandom(12345)
        b = SeededRandom(12345)
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_differ(self) -> None:
        a = SeededRandom(1)
        b = SeededRandom(2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_negative_seed_is_accepted(self) -> None:
        rng = SeededRandom(-7)
        assert 0 <= rng.next() < 1

    def test_seed_property_is_initial_seed(self) -> None:
        rng = SeededRandom(99)
        rng.next()
        assert rng.seed == 99
        assert rng.state != 99

    def test_from_state_resumes_sequence(self) -> None:
        rng = SeededRandom(7)
        for _ in range(3):
            rng.next()
        resumed = SeededRandom.from_state(rng.state)
        assert [rng.next() for _ in range(10)] == [resumed.next() for _ in range(10)]

    def test_derive_seed_is_int(self) -> None:
        seed = derive_seed()
        assert isinstance(seed, int)
        assert 0 <= seed < 1_000_000


class TestDerivedOperations:
    def test_random_int_inclusive_bounds(self, rng: SeededRandom) -> None:
        seen = {rng.random_int(1, 3) for _ in range(300)}
        assert seen == {1, 2, 3}

    def test_random_int_single_value(self, rng: SeededRandom) -> None:
        assert rng.random_int(5, 5) == 5

    def test_random_choice_returns_member(self, rng: SeededRandom) -> None:
        options = ["a", "b", "c"]
        for _ in range(50):
            assert rng.random_choice(options) in options

    def test_random_choice_empty_raises(self, rng: SeededRandom) -> None:
        with pytest.raises(IndexError):
            rng.random_choice([])

    def test_random_boolean_yields_both(self, rng: SeededRandom) -> None:
        seen = {rng.random_boolean() for _ in range(100)}
        assert seen == {True, False}

    def test_random_string_length_and_charset(self, rng: SeededRandom) -> None:
        result = rng.random_string(12)
        assert len(result) == 12
        assert all(ch in DEFAULT_CHARSET for ch in result)

    def test_random_string_custom_charset(self, rng: SeededRandom) -> None:
        result = rng.random_string(10, "01")
        assert set(result) <= {"0", "1"}

    def test_random_string_empty_charset_raises(self, rng: SeededRandom) -> None:
        with pytest.raises(IndexError):
            rng.random_string(3, "")
