"""entitygen type/schema inferencer.

Walks a sample JSON document and produces a ``SchemaRegistry`` of named class
shapes (root plus one per nested object or array-of-object shape).

Usage::

    from entitygen.inferencer import infer

    registry = infer("UserEntity", {"address": {"city": "NYC"}})
    registry.names()  # ["AddressEntity", "UserEntity"]
"""

from entitygen.inferencer.infer import classify_number, infer
from entitygen.inferencer.models import (
    FieldSpec,
    Schema,
    SchemaRegistry,
    TypeRef,
    ValueKind,
)
from entitygen.inferencer.naming import canonical_class_name, derive_name, file_stem

__all__ = [
    "infer",
    "classify_number",
    "canonical_class_name",
    "derive_name",
    "file_stem",
    "FieldSpec",
    "Schema",
    "SchemaRegistry",
    "TypeRef",
    "ValueKind",
]
