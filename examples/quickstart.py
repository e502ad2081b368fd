"""aumai-testdatagen quickstart — runnable examples for the built-in templates.

This file demonstrates:
  1. Generating users with a reproducible seed.
  2. Enforcing uniqueness across a batch.
  3. Driving generation from a custom template.
  4. Exporting a batch as a fixture file and loading it back.
  5. Assembling a hand-tuned request payload with RecordBuilder.

Run directly:
    python examples/quickstart.py

Install first:
    pip install aumai-testdatagen
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from aumai_testdatagen import (
    DataGenerator,
    GeneratedBatch,
    GenerationOptions,
    RecordBuilder,
    load_fixture,
)


# ---------------------------------------------------------------------------
# Demo 1: Reproducible users
# ---------------------------------------------------------------------------

def demo_seeded_users() -> list[dict[str, object]]:
    """Generate 3 users twice from the same seed and show they match.

    A seed guarantees that re-running the script always produces the same
    records, which keeps fixture diffs reviewable.
    """
    print("\n--- Demo 1: Seeded Users ---")

    options = GenerationOptions(count=3, seed=12345)
    first = DataGenerator().generate("user", options)
    second = DataGenerator().generate("user", options)

    for user in first:
        print(f"  {user['firstName']} {user['lastName']} <{user['email']}>  {user['address']['city']}")
    print(f"  Identical across instances: {first == second}")
    return first


# ---------------------------------------------------------------------------
# Demo 2: Unique products
# ---------------------------------------------------------------------------

def demo_unique_products() -> GeneratedBatch:
    """Generate 5 products with uniqueness enforced and print the batch metadata."""
    print("\n--- Demo 2: Unique Products ---")

    generator = DataGenerator(seed=7)
    batch = generator.generate_dataset("product", count=5, unique=True)

    for product in batch.records:
        print(f"  {product['name']:<32} {product['price']:>9.2f} {product['currency']}  *{product['rating']}")
    print(f"  Metadata: {batch.metadata}")
    return batch


# ---------------------------------------------------------------------------
# Demo 3: Custom template
# ---------------------------------------------------------------------------

def demo_custom_template() -> list[dict[str, object]]:
    """Register an in-memory template with nested objects, arrays and enums."""
    print("\n--- Demo 3: Custom Template ---")

    generator = DataGenerator(seed=2024)
    generator.register_template(
        "ticket",
        {
            "schema": {
                "title": "string",
                "priority": "enum",
                "reporter": {"email": "email", "phone": "phone"},
                "labels": ["string"],
                "openedAt": "datetime",
            },
            "enums": {"priority": ["low", "medium", "high"]},
            "data": {
                "title": ["Login fails", "Cart is empty", "Slow search"],
                "labels": ["bug", "ui", "backend"],
            },
        },
    )

    tickets = generator.generate("ticket", count=3, variations=False)
    for ticket in tickets:
        print(f"  [{ticket['priority']:>6}] {ticket['title']}  labels={ticket['labels']}")
    return tickets


# ---------------------------------------------------------------------------
# Demo 4: Export and reload
# ---------------------------------------------------------------------------

def demo_export_and_load() -> list[dict[str, object]]:
    """Write orders to a fixture file and read them back unchanged."""
    print("\n--- Demo 4: Export and Load ---")

    generator = DataGenerator(seed=99)
    with tempfile.TemporaryDirectory() as tmp:
        orders = generator.generate_and_export("order", "orders.json", count=2, directory=tmp)
        reloaded = load_fixture("orders.json", tmp)
        print(f"  Wrote {len(orders)} orders to {Path(tmp) / 'orders.json'}")
        print(f"  Round trip preserved data: {reloaded == orders}")
    return orders


# ---------------------------------------------------------------------------
# Demo 5: RecordBuilder
# ---------------------------------------------------------------------------

def demo_record_builder() -> dict[str, object]:
    """Build a user payload with Faker defaults and one explicit override."""
    print("\n--- Demo 5: RecordBuilder ---")

    payload = RecordBuilder.user(seed=1).with_field("age", 30).build()
    print(f"  {payload}")
    return payload


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Run all five quickstart demonstrations in sequence."""
    print("=" * 60)
    print("aumai-testdatagen quickstart")
    print("Seeded JSON fixtures from declarative templates")
    print("=" * 60)

    demo_seeded_users()
    demo_unique_products()
    demo_custom_template()
    demo_export_and_load()
    demo_record_builder()

    print("\nDone. All five demos completed successfully.")


if __name__ == "__main__":
    main()
