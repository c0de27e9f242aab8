"""entitygen -- Dart entity/model scaffolding from sample JSON.

Infers class shapes from a JSON document and renders clean-architecture
entity, model and nested value classes.

Quick usage::

    from entitygen import EntityGenerator

    generator = EntityGenerator()
    result = generator.generate("UserEntity", {"uuid": "abc"})
    result.as_mapping()  # {"user_entity.dart": "...", "user_model.dart": "..."}
"""

from entitygen.config import Config, LayoutConfig, NamingConfig, UnsupportedPolicy
from entitygen.emitter import RenderedFile, render, render_files
from entitygen.errors import (
    EntityGenError,
    InvalidClassName,
    InvalidInputKind,
    MissingRootSchema,
    UnsupportedValueShape,
)
from entitygen.generator import EntityGenerator, GenerationResult
from entitygen.inferencer import SchemaRegistry, infer

__all__ = [
    "infer",
    "render",
    "render_files",
    "EntityGenerator",
    "GenerationResult",
    "RenderedFile",
    "SchemaRegistry",
    "Config",
    "NamingConfig",
    "LayoutConfig",
    "UnsupportedPolicy",
    "EntityGenError",
    "InvalidInputKind",
    "InvalidClassName",
    "UnsupportedValueShape",
    "MissingRootSchema",
]
