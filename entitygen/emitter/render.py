"""Template emitter: turns a ``SchemaRegistry`` into Dart source files.

The root schema yields an entity file and a model file that reference each
other by name.  Every other schema yields one plain value-class file with
hand-written ``fromJson``/``toJson``.  Rendering is pure; nothing is written.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from entitygen.config import Config
from entitygen.emitter.dart import (
    dart_string,
    dart_type,
    default_value,
    from_json_expr,
    holds_object,
    to_json_expr,
)
from entitygen.emitter.templates import TemplateRenderer
from entitygen.errors import MissingRootSchema
from entitygen.inferencer.models import FieldSpec, Schema, SchemaRegistry
from entitygen.inferencer.naming import file_stem, strip_suffix

ENTITY_TEMPLATE = "dart/entity.dart.j2"
MODEL_TEMPLATE = "dart/model.dart.j2"
VALUE_CLASS_TEMPLATE = "dart/value_class.dart.j2"


class Layer(str, Enum):
    """Architecture layer a generated file belongs to."""
    ENTITY = "entity"
    MODEL = "model"


class RenderedFile(BaseModel):
    """One generated source file."""
    identifier: str = Field(..., description="File name, e.g. 'user_entity.dart'")
    content: str = Field(..., description="Full file content")
    layer: Layer = Field(..., description="Layer directory the file belongs in")
    class_name: str = Field(..., description="Primary class declared by the file")


def render(
    root_class_name: str,
    registry: SchemaRegistry,
    config: Optional[Config] = None,
) -> dict[str, str]:
    """Render every schema and return ``{file_identifier: content}``.

    Identifiers derived from colliding class names collide too; the file
    rendered later wins.
    """
    return {
        f.identifier: f.content
        for f in render_files(root_class_name, registry, config)
    }


def render_files(
    root_class_name: str,
    registry: SchemaRegistry,
    config: Optional[Config] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> list[RenderedFile]:
    """Render every schema in registry order.

    Raises:
        MissingRootSchema: If *root_class_name* is not in *registry*.
    """
    return _Emitter(config or Config(), renderer or TemplateRenderer()).emit(
        root_class_name, registry
    )


def model_class_name(root_class_name: str, config: Optional[Config] = None) -> str:
    """``UserEntity`` -> ``UserModel`` under the configured suffixes."""
    naming = (config or Config()).naming
    return strip_suffix(root_class_name, naming.entity_suffix) + naming.model_suffix


# ---------------------------------------------------------------------------
# Emitter
# ---------------------------------------------------------------------------


class _Emitter:
    def __init__(self, config: Config, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    def emit(self, root_class_name: str, registry: SchemaRegistry) -> list[RenderedFile]:
        root = registry.get(root_class_name)
        if root is None:
            raise MissingRootSchema(root_class_name)

        files: list[RenderedFile] = []
        for schema in registry:
            if schema.class_name == root_class_name:
                files.append(self._entity_file(schema))
                files.append(self._model_file(schema))
            else:
                files.append(self._value_class_file(schema))
        return files

    # -- Naming ------------------------------------------------------------

    def _entity_stem(self, class_name: str) -> str:
        naming = self.config.naming
        return file_stem(class_name, naming.entity_suffix, naming.snake_case_filenames)

    def _model_stem(self, class_name: str) -> str:
        naming = self.config.naming
        return file_stem(class_name, naming.model_suffix, naming.snake_case_filenames)

    def _filename(self, stem: str) -> str:
        return stem + self.config.layout.file_extension

    def _nested_imports(self, schema: Schema, prefix: str = "") -> list[str]:
        return [
            prefix + self._filename(self._entity_stem(name))
            for name in schema.references()
            if name != schema.class_name
        ]

    # -- Files -------------------------------------------------------------

    def _entity_file(self, schema: Schema) -> RenderedFile:
        layout = self.config.layout
        model_name = model_class_name(schema.class_name, self.config)
        model_import = layout.model_import_prefix + self._filename(self._model_stem(model_name))
        context = {
            "class_name": schema.class_name,
            "model_class_name": model_name,
            "entity_stem": self._entity_stem(schema.class_name),
            "imports": _unique([model_import, *self._nested_imports(schema)]),
            "hive_type_id": layout.hive_type_id,
            "fields": [_field_context(f) for f in schema.fields],
        }
        return RenderedFile(
            identifier=self._filename(self._entity_stem(schema.class_name)),
            content=self.renderer.render(ENTITY_TEMPLATE, context),
            layer=Layer.ENTITY,
            class_name=schema.class_name,
        )

    def _model_file(self, schema: Schema) -> RenderedFile:
        layout = self.config.layout
        model_name = model_class_name(schema.class_name, self.config)
        entity_import = layout.entity_import_prefix + self._filename(
            self._entity_stem(schema.class_name)
        )
        context = {
            "class_name": schema.class_name,
            "model_class_name": model_name,
            "model_stem": self._model_stem(model_name),
            "imports": _unique([
                entity_import,
                *self._nested_imports(schema, layout.entity_import_prefix),
            ]),
            "fields": [_field_context(f, with_converters=True) for f in schema.fields],
        }
        return RenderedFile(
            identifier=self._filename(self._model_stem(model_name)),
            content=self.renderer.render(MODEL_TEMPLATE, context),
            layer=Layer.MODEL,
            class_name=model_name,
        )

    def _value_class_file(self, schema: Schema) -> RenderedFile:
        context = {
            "class_name": schema.class_name,
            "imports": _unique(self._nested_imports(schema)),
            "fields": [_field_context(f) for f in schema.fields],
        }
        return RenderedFile(
            identifier=self._filename(self._entity_stem(schema.class_name)),
            content=self.renderer.render(VALUE_CLASS_TEMPLATE, context),
            layer=Layer.ENTITY,
            class_name=schema.class_name,
        )


# ---------------------------------------------------------------------------
# Field context
# ---------------------------------------------------------------------------


def _field_context(field_spec: FieldSpec, with_converters: bool = False) -> dict[str, Any]:
    """Template variables for one field.

    With *with_converters*, fields holding nested classes get static
    ``<field>FromMap``/``<field>ToMap`` helpers wired through ``@JsonKey``.
    """
    converter = ""
    if with_converters and holds_object(field_spec.type):
        converter = field_spec.identifier.rstrip("_")

    key_args: list[str] = []
    if field_spec.identifier != field_spec.name:
        key_args.append(f"name: {dart_string(field_spec.name)}")
    if converter:
        key_args.append(f"fromJson: {converter}FromMap")
        key_args.append(f"toJson: {converter}ToMap")

    return {
        "name": field_spec.name,
        "identifier": field_spec.identifier,
        "dart_type": dart_type(field_spec.type),
        "default_value": default_value(field_spec.type),
        "from_json": from_json_expr(f"json[{dart_string(field_spec.name)}]", field_spec.type),
        "to_json": to_json_expr(field_spec.identifier, field_spec.type),
        "json_key": f"@JsonKey({', '.join(key_args)})" if key_args else "",
        "converter": converter,
        "from_map": from_json_expr("json", field_spec.type) if converter else "",
        "to_map": to_json_expr("value", field_spec.type) if converter else "",
    }


def _unique(items: list[str]) -> list[str]:
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen
