"""Naming rules shared by the inferencer and the emitter.

All functions here are pure: the same input always yields the same name.
"""

from __future__ import annotations

import re

from entitygen.errors import InvalidClassName

_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")
_DART_IDENTIFIER = re.compile(r"^[A-Za-z$][A-Za-z0-9_$]*$")

# Reserved words and built-in identifiers that cannot name a Dart field.
DART_RESERVED: frozenset[str] = frozenset({
    "abstract", "as", "assert", "async", "await", "break", "case", "catch",
    "class", "const", "continue", "covariant", "default", "deferred", "do",
    "dynamic", "else", "enum", "export", "extends", "extension", "external",
    "factory", "false", "final", "finally", "for", "function", "get", "if",
    "implements", "import", "in", "interface", "is", "late", "library",
    "mixin", "new", "null", "on", "operator", "part", "required", "rethrow",
    "return", "set", "static", "super", "switch", "sync", "this", "throw",
    "true", "try", "typedef", "var", "void", "while", "with", "yield",
})

# Members the generated classes declare, plus those inherited from Object.
GENERATED_MEMBERS: frozenset[str] = frozenset({
    "empty", "fromJson", "toJson", "fromModel", "fromEntity", "toEntity",
    "fromMap", "toMap", "hashCode", "runtimeType", "toString", "noSuchMethod",
})


def to_pascal_case(value: str) -> str:
    """Capitalize the first letter of every word, keeping the rest as-is.

    ``address`` -> ``Address``, ``userData`` -> ``UserData``,
    ``line_items`` -> ``LineItems``, ``first-name`` -> ``FirstName``.
    """
    words = [w for w in _WORD_SPLIT.split(value) if w]
    pascal = "".join(w[0].upper() + w[1:] for w in words)
    if pascal and pascal[0].isdigit():
        pascal = "Field" + pascal
    return pascal


def to_camel_case(value: str) -> str:
    """``first-name`` -> ``firstName``, ``2fa`` -> ``field2fa``."""
    pascal = to_pascal_case(value)
    if not pascal:
        return ""
    if pascal.startswith("Field") and not value[:1].isalpha():
        return "f" + pascal[1:]
    return pascal[0].lower() + pascal[1:]


def to_snake_case(value: str) -> str:
    """``UserData`` -> ``user_data``, ``HTTPResponse`` -> ``http_response``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[^A-Za-z0-9]+", "_", s2).strip("_").lower()


def strip_suffix(name: str, suffix: str) -> str:
    """Remove a trailing *suffix* unless that would leave nothing."""
    if suffix and name.endswith(suffix) and len(name) > len(suffix):
        return name[: -len(suffix)]
    return name


def derive_name(key: str, suffix: str = "", parent: str = "") -> str:
    """Derive a nested class name from a JSON field key.

    The key is PascalCased and the convention's *suffix* appended.  When
    *parent* (a parent's base name) is given it is prepended, which qualifies
    the name by its position in the document.
    """
    base = to_pascal_case(key) or "Field"
    return f"{parent}{base}{suffix}"


def canonical_class_name(name: str, suffix: str) -> str:
    """Canonical root class name: PascalCase base plus exactly one *suffix*.

    ``UserEntity`` -> ``UserEntity``, ``user`` -> ``UserEntity``.  A name that
    is exactly *suffix* is already canonical: ``Entity`` -> ``Entity``.

    Raises:
        InvalidClassName: If *name* has no alphanumeric characters.
    """
    cleaned = name.strip()
    if suffix and cleaned == suffix:
        return suffix
    base = to_pascal_case(strip_suffix(cleaned, suffix))
    if not base:
        raise InvalidClassName(name)
    return base + suffix


def field_identifier(key: str, taken: set[str] | None = None) -> str:
    """Return a public, non-reserved Dart identifier for JSON key *key*.

    Valid keys are kept verbatim.  Others are camelCased from their words.
    Reserved words and names of generated members get a trailing underscore,
    and a numeric suffix keeps the identifier unique among *taken*.
    """
    if _DART_IDENTIFIER.match(key):
        candidate = key
    else:
        candidate = to_camel_case(key) or "field"
    if candidate in DART_RESERVED or candidate in GENERATED_MEMBERS:
        candidate += "_"

    if taken is None:
        return candidate
    unique = candidate
    counter = 2
    while unique in taken:
        unique = f"{candidate}{counter}"
        counter += 1
    taken.add(unique)
    return unique


def file_stem(class_name: str, suffix: str, snake_case: bool = False) -> str:
    """Derive the file name stem for *class_name*.

    The class name is lower-cased and its trailing *suffix* token becomes
    ``_<suffix>``: ``AddressEntity`` -> ``address_entity``.  With
    *snake_case* the base is snake-cased first: ``UserData`` ->
    ``user_data_entity``.
    """
    token = suffix.lower()
    if suffix and class_name.endswith(suffix) and len(class_name) > len(suffix):
        base = class_name[: -len(suffix)]
        base = to_snake_case(base) if snake_case else base.lower()
        return f"{base}_{token}"
    return to_snake_case(class_name) if snake_case else class_name.lower()
