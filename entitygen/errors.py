"""Exceptions raised by the entitygen core.

Every error is terminal for the current generation run: the input was not
usable and nothing is written.  Hosts catch ``EntityGenError`` and report it.
"""

from __future__ import annotations


class EntityGenError(Exception):
    """Base class for all generator errors."""


class InvalidInputKind(EntityGenError):
    """Raised when the root JSON value is not an object."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Expected a JSON object at the root, got {kind}")


class InvalidClassName(EntityGenError):
    """Raised when the root class name cannot produce a valid identifier."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid class name: {name!r}")


class UnsupportedValueShape(EntityGenError):
    """Raised for values the inferencer cannot classify (``fail`` policy only)."""

    def __init__(self, path: str, shape: str) -> None:
        self.path = path
        self.shape = shape
        super().__init__(f"Unsupported value shape at {path}: {shape}")


class MissingRootSchema(EntityGenError):
    """Raised when rendering is asked for a class the registry does not hold."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"No schema registered for root class {class_name}")
