"""entitygen template emitter.

Renders an inferred ``SchemaRegistry`` into Dart entity, model and nested
value-class files using the Jinja2 templates in ``templates/dart``.
"""

from entitygen.emitter.render import Layer, RenderedFile, model_class_name, render, render_files
from entitygen.emitter.templates import TemplateRenderer

__all__ = [
    "render",
    "render_files",
    "model_class_name",
    "Layer",
    "RenderedFile",
    "TemplateRenderer",
]
