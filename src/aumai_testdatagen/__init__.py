"""aumai-testdatagen — seeded, template-driven test fixtures."""

from aumai_testdatagen.builders import RecordBuilder
from aumai_testdatagen.core import DataGenerator, RecordGenerator, generate_batch
from aumai_testdatagen.exceptions import (
    DataGenError,
    ExportError,
    FixtureLoadError,
    TemplateLoadError,
    TemplateNotFoundError,
)
from aumai_testdatagen.fixtures import export_to_file, load_fixture
from aumai_testdatagen.models import (
    DataTemplate,
    FieldConstraints,
    FieldType,
    GeneratedBatch,
    GenerationOptions,
)
from aumai_testdatagen.prng import SeededRandom

__version__ = "0.1.0"

__all__ = [
    "DataGenerator",
    "RecordGenerator",
    "generate_batch",
    "RecordBuilder",
    "SeededRandom",
    "DataTemplate",
    "FieldConstraints",
    "FieldType",
    "GeneratedBatch",
    "GenerationOptions",
    "export_to_file",
    "load_fixture",
    "DataGenError",
    "ExportError",
    "FixtureLoadError",
    "TemplateLoadError",
    "TemplateNotFoundError",
]
