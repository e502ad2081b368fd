"""Tests for RecordBuilder."""
from __future__ import annotations

from faker import Faker

from aumai_testdatagen.builders import RecordBuilder


class TestRecordBuilder:
    def test_user_defaults(self) -> None:
        user = RecordBuilder.user(seed=1).build()
        assert set(user) == {"name", "email", "age"}
        assert user["name"].startswith("Test User ")
        assert "@" in user["email"]
        assert 18 <= user["age"] <= 65

    def test_post_defaults(self) -> None:
        post = RecordBuilder.post(seed=1).build()
        assert set(post) == {"title", "body", "userId"}
        assert post["title"].startswith("Test Post ")
        assert 1 <= post["userId"] <= 10

    def test_seed_is_reproducible(self) -> None:
        assert RecordBuilder.user(seed=7).build() == RecordBuilder.user(seed=7).build()

    def test_accepts_faker_instance(self) -> None:
        faker = Faker()
        faker.seed_instance(3)
        user = RecordBuilder.user(faker=faker).build()
        assert "email" in user

    def test_with_field_overrides(self) -> None:
        user = RecordBuilder.user(seed=1).with_field("age", 99).build()
        assert user["age"] == 99

    def test_with_fields_merges(self) -> None:
        post = RecordBuilder.post(seed=1).with_fields({"userId": 3, "draft": True}).build()
        assert post["userId"] == 3
        assert post["draft"] is True

    def test_with_defaults_on_empty_builder(self) -> None:
        built = RecordBuilder().with_defaults({"a": 1}).with_defaults({"b": 2}).build()
        assert built == {"a": 1, "b": 2}

    def test_build_returns_copy(self) -> None:
        builder = RecordBuilder().with_field("a", 1)
        first = builder.build()
        first["a"] = 2
        assert builder.build() == {"a": 1}
