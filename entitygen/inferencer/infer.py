"""Recursive type/schema inference over a sample JSON document.

The walk is depth-first.  Each call builds the schema for one JSON object and
returns a registry *fragment* holding that schema plus every nested schema it
triggered; the caller merges the fragment into its own.  Nested schemas are
therefore registered before their parent, and a nested class whose derived
name is already taken replaces the earlier one (see ``SchemaRegistry``).

Two simplifications are deliberate policy:

* Arrays are typed from their first element only; homogeneity is assumed.
* Numbers are classified by value, so ``2.0`` is an ``integer`` just like ``2``.
"""

from __future__ import annotations

from typing import Any, Optional

from entitygen.config import NamingConfig, UnsupportedPolicy
from entitygen.errors import InvalidInputKind, UnsupportedValueShape
from entitygen.inferencer.models import FieldSpec, Schema, SchemaRegistry, TypeRef, ValueKind
from entitygen.inferencer.naming import canonical_class_name, derive_name, field_identifier, strip_suffix

# Objects and arrays nested deeper than this are unsupported shapes.
MAX_NESTING_DEPTH = 64


def infer(
    root_name: str,
    root_value: Any,
    config: Optional[NamingConfig] = None,
) -> SchemaRegistry:
    """Infer every class shape reachable from *root_value*.

    Args:
        root_name: Requested root class name, with or without the entity
            suffix (``"User"`` and ``"UserEntity"`` are equivalent).
        root_value: Parsed JSON document; must be an object.
        config: Naming and unsupported-shape policy.  Defaults apply if omitted.

    Returns:
        A fresh registry; the root schema is keyed under the canonical root
        class name and registered last.

    Raises:
        InvalidInputKind: If *root_value* is not a JSON object.
        InvalidClassName: If *root_name* yields no usable class name.
        UnsupportedValueShape: Under the ``fail`` policy only.
    """
    config = config or NamingConfig()
    if not isinstance(root_value, dict):
        raise InvalidInputKind(describe_kind(root_value))
    class_name = canonical_class_name(root_name, config.entity_suffix)
    return _infer_object(class_name, root_value, config, path="$", is_root=True)


def classify_number(value: int | float) -> ValueKind:
    """``INTEGER`` when *value* has no fractional part, else ``FLOAT``."""
    if isinstance(value, int) or float(value).is_integer():
        return ValueKind.INTEGER
    return ValueKind.FLOAT


def describe_kind(value: Any) -> str:
    """Human-readable JSON kind of *value*, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


# ---------------------------------------------------------------------------
# Internal walk
# ---------------------------------------------------------------------------

def _infer_object(
    class_name: str,
    obj: dict[str, Any],
    config: NamingConfig,
    path: str,
    is_root: bool = False,
    depth: int = 0,
) -> SchemaRegistry:
    fragment = SchemaRegistry()
    fields: list[FieldSpec] = []
    taken: set[str] = set()

    for key, value in obj.items():
        key = str(key)
        type_ref, nested = _classify(
            key, value, class_name, config, f"{path}.{key}", depth + 1
        )
        fragment.merge(nested)
        fields.append(
            FieldSpec(name=key, identifier=field_identifier(key, taken), type=type_ref)
        )

    fragment.register(
        Schema(class_name=class_name, fields=fields, is_root=is_root, source_path=path)
    )
    return fragment


def _classify(
    key: str,
    value: Any,
    parent_class: str,
    config: NamingConfig,
    path: str,
    depth: int,
) -> tuple[TypeRef, SchemaRegistry]:
    """Return the type of *value* and the schemas it introduced."""
    empty = SchemaRegistry()

    if isinstance(value, (list, dict)) and depth > MAX_NESTING_DEPTH:
        return _unsupported(path, "nesting too deep", config), empty

    if isinstance(value, str):
        return TypeRef.primitive(ValueKind.STRING), empty
    # bool is a subclass of int
    if isinstance(value, bool):
        return TypeRef.primitive(ValueKind.BOOLEAN), empty
    if isinstance(value, (int, float)):
        return TypeRef.primitive(classify_number(value)), empty
    if value is None:
        return TypeRef.primitive(ValueKind.NULL), empty

    if isinstance(value, list):
        if not value:
            return TypeRef.list_of(TypeRef.primitive(ValueKind.UNKNOWN)), empty
        first = value[0]
        if first is None:
            return TypeRef.list_of(_unsupported(path + "[0]", "array of null", config)), empty
        element, nested = _classify(key, first, parent_class, config, path + "[0]", depth + 1)
        return TypeRef.list_of(element), nested

    if isinstance(value, dict):
        parent = ""
        if config.qualify_nested_names:
            parent = strip_suffix(parent_class, config.entity_suffix)
        nested_name = derive_name(key, config.entity_suffix, parent)
        return TypeRef.object_ref(nested_name), _infer_object(
            nested_name, value, config, path, depth=depth
        )

    return _unsupported(path, describe_kind(value), config), empty


def _unsupported(path: str, shape: str, config: NamingConfig) -> TypeRef:
    if config.unsupported_policy == UnsupportedPolicy.FAIL:
        raise UnsupportedValueShape(path, shape)
    return TypeRef.primitive(ValueKind.UNKNOWN)
