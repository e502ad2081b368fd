"""Core data-generation logic for aumai-testdatagen."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from aumai_testdatagen.exceptions import TemplateLoadError, TemplateNotFoundError
from aumai_testdatagen.fixtures import DEFAULT_FIXTURES_DIR, export_to_file
from aumai_testdatagen.models import (
    ArrayField,
    DataTemplate,
    FieldDescriptor,
    GeneratedBatch,
    GenerationOptions,
    ObjectField,
    UnknownField,
)
from aumai_testdatagen.primitives import ValueGenerator
from aumai_testdatagen.prng import SeededRandom, derive_seed
from aumai_testdatagen.templates import BUILTIN_TEMPLATES

logger = logging.getLogger(__name__)

MAX_UNIQUE_ATTEMPTS = 100
MIN_ARRAY_LENGTH = 1
MAX_ARRAY_LENGTH = 5

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def canonical_key(record: Mapping[str, Any]) -> str:
    """Return a serialization that is equal for records with equal content."""
    return json.dumps(record, sort_keys=True, separators=(",", ":"), default=str)


def parse_template(name: str, raw: Mapping[str, Any]) -> DataTemplate:
    """Validate a raw template mapping, wrapping validation errors."""
    try:
        return DataTemplate.model_validate(raw)
    except ValidationError as exc:
        raise TemplateLoadError(f"Invalid template {name!r}: {exc}") from exc


def read_template(name: str, path: str | Path) -> DataTemplate:
    """Read and validate the template JSON document at *path*."""
    template_path = Path(path)
    try:
        raw = json.loads(template_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise TemplateLoadError(
            f"Failed to load template {name!r} from {template_path}: {exc}"
        ) from exc
    if not isinstance(raw, dict):
        raise TemplateLoadError(
            f"Failed to load template {name!r} from {template_path}: "
            f"expected a JSON object, got {type(raw).__name__}"
        )
    return parse_template(name, raw)


# ---------------------------------------------------------------------------
# RecordGenerator
# ---------------------------------------------------------------------------


class RecordGenerator:
    """Walk a template's descriptor tree and produce one record per call.

    Nested objects and array elements look up constraints, enums and data
    pools by their own local field name, not by a dotted path.
    """

    def __init__(self, values: ValueGenerator) -> None:
        self._values = values

    def generate(self, template: DataTemplate, variations: bool = True) -> dict[str, Any]:
        """Return one record whose keys follow the schema declaration order."""
        return self._generate_object(template.root, template, variations)

    def _generate_object(
        self, descriptor: ObjectField, template: DataTemplate, variations: bool
    ) -> dict[str, Any]:
        return {
            name: self._generate_field(name, child, template, variations)
            for name, child in descriptor.children.items()
        }

    def _generate_field(
        self,
        name: str,
        descriptor: FieldDescriptor,
        template: DataTemplate,
        variations: bool,
    ) -> Any:  # noqa: ANN401
        if isinstance(descriptor, ObjectField):
            return self._generate_object(descriptor, template, variations)
        if isinstance(descriptor, ArrayField):
            length = self._values.rng.random_int(MIN_ARRAY_LENGTH, MAX_ARRAY_LENGTH)
            return [
                self._generate_field(name, descriptor.element, template, variations)
                for _ in range(length)
            ]

        constraints = template.constraints_for(name)
        enum_values = template.enum_for(name)
        pool = template.pool_for(name)
        if isinstance(descriptor, UnknownField):
            return self._values.fallback(constraints, enum_values, pool, variations)
        return self._values.generate(descriptor.type, constraints, enum_values, pool, variations)


# ---------------------------------------------------------------------------
# Batch generation
# ---------------------------------------------------------------------------


def generate_batch(
    template: DataTemplate,
    options: GenerationOptions,
    rng: SeededRandom,
    *,
    name: str = "",
    reference_time: datetime | None = None,
) -> GeneratedBatch:
    """Generate ``options.count`` records of *template* drawing from *rng*.

    With ``options.unique`` a record whose canonical key was already emitted
    is regenerated, up to :data:`MAX_UNIQUE_ATTEMPTS` attempts in total.
    When every attempt collides the last record is kept anyway and a warning
    is logged, so the batch always has the requested length.

    The final PRNG state is reported as ``metadata["final_state"]``; pass it
    to :meth:`SeededRandom.from_state` to continue the sequence elsewhere.
    """
    start = time.perf_counter()
    walker = RecordGenerator(ValueGenerator(rng, reference_time))

    records: list[dict[str, Any]] = []
    emitted: set[str] = set()
    duplicate_count = 0

    for index in range(options.count):
        record = walker.generate(template, options.variations)
        if options.unique:
            key = canonical_key(record)
            attempts = 1
            while key in emitted and attempts < MAX_UNIQUE_ATTEMPTS:
                logger.debug("Duplicate %s record at index %d, retrying", name, index)
                record = walker.generate(template, options.variations)
                key = canonical_key(record)
                attempts += 1
            if key in emitted:
                duplicate_count += 1
                logger.warning(
                    "Could not generate a unique %s record after %d attempts (index %d)",
                    name or "template",
                    MAX_UNIQUE_ATTEMPTS,
                    index,
                )
            emitted.add(key)
        records.append(record)

    elapsed_ms = (time.perf_counter() - start) * 1000
    return GeneratedBatch(
        template=name,
        options=options,
        records=records,
        metadata={
            "generated_count": len(records),
            "duplicate_count": duplicate_count,
            "seed": rng.seed,
            "final_state": rng.state,
            "generation_time_ms": round(elapsed_ms, 2),
        },
    )


# ---------------------------------------------------------------------------
# DataGenerator
# ---------------------------------------------------------------------------


class DataGenerator:
    """Caller-owned generator: a template registry plus one PRNG sequence.

    Construct one per test context.  Calls without an explicit ``seed``
    option continue this instance's sequence; calls with one use a fresh
    sequence and leave the instance's untouched.  An instance is not safe to
    share between threads.
    """

    def __init__(
        self,
        seed: int | None = None,
        templates_dir: str | Path | None = None,
        reference_time: datetime | None = None,
    ) -> None:
        self._rng = SeededRandom(seed if seed is not None else derive_seed())
        self._templates_dir = Path(templates_dir) if templates_dir is not None else None
        self._reference_time = reference_time
        self._templates: dict[str, DataTemplate] = {}

    @property
    def seed(self) -> int:
        return self._rng.seed

    @property
    def rng(self) -> SeededRandom:
        return self._rng

    @property
    def templates_dir(self) -> Path | None:
        return self._templates_dir

    # ------------------------------------------------------------------
    # Template registry
    # ------------------------------------------------------------------

    def load_template(self, name: str, path: str | Path | None = None) -> DataTemplate:
        """Load template *name* and cache it.

        Without *path*, ``<templates_dir>/<name>.json`` is tried first and the
        built-in templates second.
        """
        if path is not None:
            template = read_template(name, path)
        else:
            candidate = (
                self._templates_dir / f"{name}.json" if self._templates_dir is not None else None
            )
            if candidate is not None and candidate.is_file():
                template = read_template(name, candidate)
            elif name in BUILTIN_TEMPLATES:
                template = parse_template(name, BUILTIN_TEMPLATES[name])
            else:
                raise TemplateNotFoundError(name)

        self._templates[name] = template
        logger.info("Loaded template %r", name)
        return template

    def register_template(
        self, name: str, template: DataTemplate | Mapping[str, Any]
    ) -> DataTemplate:
        """Register an in-memory template under *name*, replacing any cached one."""
        if not isinstance(template, DataTemplate):
            template = parse_template(name, template)
        self._templates[name] = template
        return template

    def get_template(self, name: str) -> DataTemplate:
        cached = self._templates.get(name)
        if cached is not None:
            return cached
        return self.load_template(name)

    def template_names(self) -> list[str]:
        """Return every template name this generator can resolve."""
        names = set(BUILTIN_TEMPLATES) | set(self._templates)
        if self._templates_dir is not None and self._templates_dir.is_dir():
            names.update(path.stem for path in self._templates_dir.glob("*.json"))
        return sorted(names)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_options(
        options: GenerationOptions | None, overrides: dict[str, Any]
    ) -> GenerationOptions:
        if options is None:
            return GenerationOptions(**overrides)
        if overrides:
            return GenerationOptions.model_validate({**options.model_dump(), **overrides})
        return options

    def generate_dataset(
        self,
        template_name: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GeneratedBatch:
        """Generate a full GeneratedBatch (records plus metadata)."""
        resolved = self._resolve_options(options, overrides)
        template = self.get_template(template_name)
        rng = SeededRandom(resolved.seed) if resolved.seed is not None else self._rng
        return generate_batch(
            template,
            resolved,
            rng,
            name=template_name,
            reference_time=self._reference_time,
        )

    def generate(
        self,
        template_name: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> list[dict[str, Any]]:
        """Return ``count`` records of *template_name* in generation order."""
        return self.generate_dataset(template_name, options, **overrides).records

    def generate_user(
        self, options: GenerationOptions | None = None, **overrides: Any
    ) -> list[dict[str, Any]]:
        return self.generate("user", options, **overrides)

    def generate_product(
        self, options: GenerationOptions | None = None, **overrides: Any
    ) -> list[dict[str, Any]]:
        return self.generate("product", options, **overrides)

    def generate_order(
        self, options: GenerationOptions | None = None, **overrides: Any
    ) -> list[dict[str, Any]]:
        return self.generate("order", options, **overrides)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_to_file(
        self,
        records: list[dict[str, Any]],
        filename: str,
        directory: str | Path = DEFAULT_FIXTURES_DIR,
    ) -> Path:
        return export_to_file(records, filename, directory)

    def generate_and_export(
        self,
        template_name: str,
        filename: str,
        options: GenerationOptions | None = None,
        directory: str | Path = DEFAULT_FIXTURES_DIR,
        **overrides: Any,
    ) -> list[dict[str, Any]]:
        """Generate records, write them to ``directory/filename`` and return them."""
        records = self.generate(template_name, options, **overrides)
        export_to_file(records, filename, directory)
        return records


__all__ = [
    "DataGenerator",
    "MAX_UNIQUE_ATTEMPTS",
    "RecordGenerator",
    "canonical_key",
    "generate_batch",
    "parse_template",
    "read_template",
]
