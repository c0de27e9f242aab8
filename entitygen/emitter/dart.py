"""Dart type names, default values and JSON conversion expressions.

Each helper maps an inferred ``TypeRef`` to a fragment of Dart source.  The
fragments are assembled into whole files by the Jinja2 templates.
"""

from __future__ import annotations

import re

from entitygen.inferencer.models import TypeRef, ValueKind


# ---------------------------------------------------------------------------
# Type-to-Dart mappings
# ---------------------------------------------------------------------------

_DART_TYPE_MAP: dict[ValueKind, str] = {
    ValueKind.STRING: "String",
    ValueKind.INTEGER: "int",
    ValueKind.FLOAT: "double",
    ValueKind.BOOLEAN: "bool",
    ValueKind.NULL: "dynamic",
    ValueKind.UNKNOWN: "dynamic",
}

_DEFAULT_VALUE_MAP: dict[ValueKind, str] = {
    ValueKind.STRING: "''",
    ValueKind.INTEGER: "0",
    ValueKind.FLOAT: "0",
    ValueKind.BOOLEAN: "false",
    ValueKind.LIST: "[]",
    ValueKind.NULL: "null",
    ValueKind.UNKNOWN: "null",
}

# Element kinds a ``List<T>.from`` copy can decode without a per-item cast.
_LIST_FROM_KINDS = frozenset({
    ValueKind.STRING,
    ValueKind.INTEGER,
    ValueKind.BOOLEAN,
    ValueKind.NULL,
    ValueKind.UNKNOWN,
})


def dart_type(ref: TypeRef) -> str:
    """Dart type annotation for *ref*: ``String``, ``List<int>``, ``AddressEntity``..."""
    if ref.kind == ValueKind.LIST:
        return f"List<{dart_type(ref.element)}>"
    if ref.kind == ValueKind.OBJECT:
        return ref.reference
    return _DART_TYPE_MAP[ref.kind]


def default_value(ref: TypeRef) -> str:
    """Placeholder expression used by the generated ``empty()`` factories."""
    if ref.kind == ValueKind.OBJECT:
        return f"{ref.reference}.empty()"
    return _DEFAULT_VALUE_MAP[ref.kind]


_CONTROL_CHAR = re.compile(r"[\x00-\x1f\x7f]")

_SHORT_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def dart_string(value: str) -> str:
    """Single-quoted Dart string literal for *value*.

    Control characters use Dart's short escapes where one exists and
    ``\\xHH`` otherwise.
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("$", "\\$")
    )
    escaped = _CONTROL_CHAR.sub(_escape_control, escaped)
    return f"'{escaped}'"


def _escape_control(match: re.Match[str]) -> str:
    char = match.group()
    return _SHORT_ESCAPES.get(char, f"\\x{ord(char):02x}")


def holds_object(ref: TypeRef) -> bool:
    """Whether *ref* is a class reference, directly or inside lists."""
    return ref.innermost.kind == ValueKind.OBJECT


# ---------------------------------------------------------------------------
# JSON conversion expressions
# ---------------------------------------------------------------------------

def _lambda_var(depth: int) -> str:
    return "e" if depth == 0 else f"e{depth}"


def from_json_expr(expr: str, ref: TypeRef, depth: int = 0) -> str:
    """Dart expression decoding the JSON value *expr* into *ref*'s type."""
    kind = ref.kind
    if kind == ValueKind.STRING:
        return f"{expr} as String"
    if kind == ValueKind.INTEGER:
        return f"{expr} as int"
    if kind == ValueKind.FLOAT:
        return f"({expr} as num).toDouble()"
    if kind == ValueKind.BOOLEAN:
        return f"{expr} as bool"
    if kind == ValueKind.OBJECT:
        return f"{ref.reference}.fromJson({expr} as Map<String, dynamic>)"
    if kind == ValueKind.LIST:
        element = ref.element
        if element.kind in _LIST_FROM_KINDS:
            return f"{dart_type(ref)}.from({expr} as List<dynamic>)"
        var = _lambda_var(depth)
        inner = from_json_expr(var, element, depth + 1)
        return f"({expr} as List<dynamic>).map(({var}) => {inner}).toList()"
    return expr


def to_json_expr(expr: str, ref: TypeRef, depth: int = 0) -> str:
    """Dart expression encoding *expr* (of *ref*'s type) as a JSON value."""
    if ref.kind == ValueKind.OBJECT:
        return f"{expr}.toJson()"
    if ref.kind == ValueKind.LIST and holds_object(ref):
        var = _lambda_var(depth)
        inner = to_json_expr(var, ref.element, depth + 1)
        return f"{expr}.map(({var}) => {inner}).toList()"
    return expr
