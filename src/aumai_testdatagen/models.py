"""Pydantic v2 models for aumai-testdatagen."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class FieldType(str, Enum):
    """Enumeration of supported primitive type tags."""

    string = "string"
    number = "number"
    boolean = "boolean"
    email = "email"
    phone = "phone"
    date = "date"
    datetime = "datetime"
    url = "url"
    text = "text"
    enum = "enum"


# ---------------------------------------------------------------------------
# Type descriptors
# A template schema is decoded once into this tree so record generation
# never has to re-inspect raw JSON shapes.
# ---------------------------------------------------------------------------


class ScalarField(BaseModel):
    """A field generated by one of the primitive value generators."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    type: FieldType


class UnknownField(BaseModel):
    """A field whose type tag is not recognised.

    Generation falls back to enum behaviour when the field has an enum list
    and to string behaviour otherwise.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    tag: str


class ObjectField(BaseModel):
    """A nested mapping of field name to descriptor."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    children: dict[str, FieldDescriptor]


class ArrayField(BaseModel):
    """A list whose elements all follow ``element``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element: FieldDescriptor


FieldDescriptor = Union[ScalarField, UnknownField, ObjectField, ArrayField]

ObjectField.model_rebuild()
ArrayField.model_rebuild()

_TYPE_TAGS = {member.value: member for member in FieldType}


def decode_descriptor(raw: object) -> FieldDescriptor:
    """Decode one raw schema entry into a :data:`FieldDescriptor`.

    Mappings become objects, lists become arrays of their first element and
    strings become scalars.  Anything else is kept as an unknown tag.
    """
    if isinstance(raw, dict):
        return decode_schema(raw)
    if isinstance(raw, list):
        element = decode_descriptor(raw[0]) if raw else UnknownField(tag="")
        return ArrayField(element=element)
    if isinstance(raw, str) and raw in _TYPE_TAGS:
        return ScalarField(type=_TYPE_TAGS[raw])
    return UnknownField(tag=str(raw))


def decode_schema(raw: dict[str, Any]) -> ObjectField:
    """Decode a whole schema mapping, preserving declaration order."""
    return ObjectField(
        children={str(name): decode_descriptor(value) for name, value in raw.items()}
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class FieldConstraints(BaseModel):
    """Numeric and length bounds applied to a single field."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    min: float | None = None
    max: float | None = None
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    decimal: int | None = None
    min_age: int | None = Field(default=None, alias="minAge")
    max_age: int | None = Field(default=None, alias="maxAge")
    format: str | None = None


class DataTemplate(BaseModel):
    """A declarative record template.

    ``schema`` alone decides the record shape; ``constraints``, ``enums`` and
    ``data`` only modulate the generated content.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    schema_: dict[str, Any] = Field(alias="schema")
    constraints: dict[str, FieldConstraints] = Field(default_factory=dict)
    enums: dict[str, list[str]] = Field(default_factory=dict)
    data: dict[str, list[Any]] = Field(default_factory=dict)

    _root: ObjectField = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN401
        self._root = decode_schema(self.schema_)

    @property
    def root(self) -> ObjectField:
        """The decoded descriptor tree for ``schema``."""
        return self._root

    def constraints_for(self, field: str) -> FieldConstraints:
        constraints = self.constraints.get(field)
        return constraints if constraints is not None else FieldConstraints()

    def enum_for(self, field: str) -> list[str] | None:
        return self.enums.get(field)

    def pool_for(self, field: str) -> list[Any] | None:
        return self.data.get(field)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class GenerationOptions(BaseModel):
    """Per-call configuration for a batch generation run."""

    count: int = Field(gt=0, default=1)
    seed: int | None = None
    variations: bool = True
    unique: bool = False


class GeneratedBatch(BaseModel):
    """The output of a generation run: options, records, and metadata."""

    template: str
    options: GenerationOptions
    records: list[dict[str, Any]]
    metadata: dict[str, Any] = Field(default_factory=dict)


__all__ = [
    "ArrayField",
    "DataTemplate",
    "FieldConstraints",
    "FieldDescriptor",
    "FieldType",
    "GeneratedBatch",
    "GenerationOptions",
    "ObjectField",
    "ScalarField",
    "UnknownField",
    "decode_descriptor",
    "decode_schema",
]
