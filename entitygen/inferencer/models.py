"""Data model for inferred class shapes.

``TypeRef`` / ``FieldSpec`` / ``Schema`` are Pydantic v2 models.  The
``SchemaRegistry`` is a plain insertion-ordered container built by one
inference run and consumed by the emitter.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ValueKind(str, Enum):
    """Classification of a JSON value.

    ``NULL`` is a JSON ``null`` (emitted as ``dynamic``).  ``UNKNOWN`` marks a
    type that could not be determined, e.g. the element of an empty array.
    """
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    LIST = "list"
    OBJECT = "object"
    NULL = "null"
    UNKNOWN = "unknown"


PRIMITIVE_KINDS = frozenset({
    ValueKind.STRING,
    ValueKind.INTEGER,
    ValueKind.FLOAT,
    ValueKind.BOOLEAN,
    ValueKind.NULL,
    ValueKind.UNKNOWN,
})


# ---------------------------------------------------------------------------
# Type references
# ---------------------------------------------------------------------------

class TypeRef(BaseModel):
    """A resolved primitive, a list of another ``TypeRef``, or a class reference."""
    kind: ValueKind = Field(..., description="Value classification")
    element: Optional[TypeRef] = Field(default=None, description="Element type for lists")
    reference: Optional[str] = Field(
        default=None, description="Referenced class name for objects"
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "TypeRef":
        if (self.kind == ValueKind.LIST) != (self.element is not None):
            raise ValueError("element must be set for list types and only for list types")
        if (self.kind == ValueKind.OBJECT) != bool(self.reference):
            raise ValueError("reference must be set for object types and only for object types")
        return self

    @classmethod
    def primitive(cls, kind: ValueKind) -> "TypeRef":
        return cls(kind=kind)

    @classmethod
    def list_of(cls, element: "TypeRef") -> "TypeRef":
        return cls(kind=ValueKind.LIST, element=element)

    @classmethod
    def object_ref(cls, class_name: str) -> "TypeRef":
        return cls(kind=ValueKind.OBJECT, reference=class_name)

    @property
    def innermost(self) -> "TypeRef":
        """The non-list type at the bottom of nested lists."""
        ref = self
        while ref.element is not None:
            ref = ref.element
        return ref

    def references(self) -> list[str]:
        """Class names referenced by this type, looking through lists."""
        inner = self.innermost
        return [inner.reference] if inner.reference else []


TypeRef.model_rebuild()


class FieldSpec(BaseModel):
    """One field of an inferred class."""
    name: str = Field(..., description="JSON key, used for (de)serialization")
    identifier: str = Field(..., description="Field name in the generated source")
    type: TypeRef = Field(..., description="Inferred type")

    @property
    def value_kind(self) -> ValueKind:
        return self.type.kind

    @property
    def element_type(self) -> Optional[TypeRef]:
        return self.type.element

    @property
    def reference_type(self) -> Optional[str]:
        return self.type.reference


class Schema(BaseModel):
    """One inferred class shape."""
    class_name: str = Field(..., description="Unique class name within a run")
    fields: list[FieldSpec] = Field(default_factory=list, description="Fields in key order")
    is_root: bool = Field(default=False, description="Whether this is the run's root class")
    source_path: str = Field(default="$", description="JSON path the shape was inferred from")

    def field(self, name: str) -> FieldSpec:
        """Return the field for JSON key *name*."""
        for field_spec in self.fields:
            if field_spec.name == name:
                return field_spec
        raise KeyError(name)

    def references(self) -> list[str]:
        """Every class name this schema refers to, first-seen order, no duplicates."""
        seen: list[str] = []
        for field_spec in self.fields:
            for name in field_spec.type.references():
                if name not in seen:
                    seen.append(name)
        return seen


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class SchemaRegistry:
    """Insertion-ordered ``class_name -> Schema`` mapping for one run.

    Registering a name that is already present replaces the schema in place
    (its original position is kept) and records the name in ``collisions``.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}
        self.collisions: list[str] = []

    def register(self, schema: Schema) -> None:
        if schema.class_name in self._schemas:
            self.collisions.append(schema.class_name)
        self._schemas[schema.class_name] = schema

    def merge(self, fragment: "SchemaRegistry") -> None:
        """Register every schema of *fragment*, in its order."""
        self.collisions.extend(fragment.collisions)
        for schema in fragment:
            self.register(schema)

    def get(self, class_name: str) -> Optional[Schema]:
        return self._schemas.get(class_name)

    def names(self) -> list[str]:
        return list(self._schemas)

    @property
    def root(self) -> Optional[Schema]:
        for schema in self._schemas.values():
            if schema.is_root:
                return schema
        return None

    def nested(self) -> list[Schema]:
        return [s for s in self._schemas.values() if not s.is_root]

    def __getitem__(self, class_name: str) -> Schema:
        return self._schemas[class_name]

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(list(self._schemas.values()))

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry({self.names()!r})"
