"""Generation façade.

Chains the inferencer and the emitter into one call and writes the resulting
files into the entity and model directories.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from entitygen.config import Config
from entitygen.emitter.render import Layer, RenderedFile, model_class_name, render_files
from entitygen.emitter.templates import TemplateRenderer
from entitygen.inferencer.infer import infer
from entitygen.inferencer.naming import canonical_class_name
from entitygen.utils import write_file


class GenerationResult(BaseModel):
    """Everything one generation run produced."""

    root_class_name: str = Field(..., description="Canonical entity class name")
    model_class_name: str = Field(..., description="Paired model class name")
    files: list[RenderedFile] = Field(default_factory=list, description="Rendered files in order")
    schema_names: list[str] = Field(
        default_factory=list, description="Registered class names in insertion order"
    )
    collisions: list[str] = Field(
        default_factory=list, description="Class names registered more than once"
    )

    def as_mapping(self) -> dict[str, str]:
        """``{file_identifier: content}``; later files win on identifier collisions."""
        return {f.identifier: f.content for f in self.files}

    def files_for(self, layer: Layer) -> list[RenderedFile]:
        return [f for f in self.files if f.layer == layer]


class EntityGenerator:
    """Infers schemas from sample JSON and renders the entity/model files.

    Each ``generate`` call starts from a fresh registry; nothing carries over
    between runs.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, class_name: str, data: Any) -> GenerationResult:
        """Infer and render the classes for *data*.

        Raises:
            InvalidInputKind: If *data* is not a JSON object.
            InvalidClassName: If *class_name* is unusable.
            UnsupportedValueShape: Under the ``fail`` policy only.
        """
        naming = self.config.naming
        root = canonical_class_name(class_name, naming.entity_suffix)
        registry = infer(class_name, data, naming)
        files = render_files(root, registry, self.config, self.renderer)
        return GenerationResult(
            root_class_name=root,
            model_class_name=model_class_name(root, self.config),
            files=files,
            schema_names=registry.names(),
            collisions=list(registry.collisions),
        )

    async def write(
        self,
        result: GenerationResult,
        entity_dir: str | Path | None = None,
        model_dir: str | Path | None = None,
    ) -> list[Path]:
        """Write every file of *result*, overwriting existing files.

        Entity-layer files go to *entity_dir* and the model file to
        *model_dir*.  *model_dir* defaults to *entity_dir*; when neither is
        given the configured directories are used.  Files are written one
        after another.

        Returns:
            List of written file paths.
        """
        if entity_dir is None and model_dir is None:
            entity_root, model_root = self.config.entity_path, self.config.model_path
        else:
            entity_root = Path(entity_dir) if entity_dir is not None else self.config.entity_path
            model_root = Path(model_dir) if model_dir is not None else entity_root

        written: list[Path] = []
        for rendered in result.files:
            base = model_root if rendered.layer == Layer.MODEL else entity_root
            out = base / rendered.identifier
            await asyncio.to_thread(write_file, out, rendered.content)
            written.append(out)
        return written
