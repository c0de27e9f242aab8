"""Interactive generation session.

The generator core is pure; prompting, picking directories and writing files
belong to a *host*.  ``run_session`` drives one generation run against any
object implementing the ``Host`` protocol, reporting problems through the host
instead of raising.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from entitygen.config import Config
from entitygen.emitter.render import Layer
from entitygen.errors import EntityGenError
from entitygen.generator import EntityGenerator, GenerationResult
from entitygen.utils import parse_json_text

# Question keys passed to the host so it can pre-fill answers.
CLASS_NAME = "class_name"
JSON_INPUT = "json"
ENTITY_DIR = "entity_dir"
MODEL_DIR = "model_dir"


class Host(Protocol):
    """Capabilities the session needs from its environment."""

    def ask_string(self, key: str, prompt: str) -> Optional[str]: ...

    def pick_directory(self, key: str, label: str) -> Optional[Path]: ...

    async def write_file(self, path: Path, content: str) -> None: ...

    def show_info(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...


async def run_session(host: Host, config: Optional[Config] = None) -> Optional[GenerationResult]:
    """Run one prompt -> generate -> write cycle.

    A dismissed prompt or unusable input aborts the whole run.

    Returns:
        The generation result, or ``None`` if the run was aborted or failed.
    """
    class_name = host.ask_string(CLASS_NAME, "Enter the main model class name (e.g., CarEntity)")
    if not class_name or not class_name.strip():
        host.show_error("Model class name is required.")
        return None

    json_input = host.ask_string(JSON_INPUT, "Enter JSON structure for the model fields")
    if not json_input or not json_input.strip():
        host.show_error("JSON input is required.")
        return None

    try:
        data = parse_json_text(json_input)
    except (ValueError, RecursionError):
        host.show_error("Invalid JSON format. Please check your input.")
        return None

    entity_dir = host.pick_directory(ENTITY_DIR, "Select folder to save the Entity file")
    if entity_dir is None:
        host.show_error("No directory selected for Entity file.")
        return None

    model_dir = host.pick_directory(MODEL_DIR, "Select folder to save the Model file")
    if model_dir is None:
        host.show_error("No directory selected for Model file.")
        return None

    generator = EntityGenerator(config)
    try:
        result = generator.generate(class_name, data)
        for rendered in result.files:
            base = model_dir if rendered.layer == Layer.MODEL else entity_dir
            await host.write_file(base / rendered.identifier, rendered.content)
    except (EntityGenError, OSError) as exc:
        host.show_error(f"Failed to generate Dart models: {exc}")
        return None

    for name in dict.fromkeys(result.collisions):
        host.show_warning(f"Class name {name} was inferred more than once; the last shape wins.")

    host.show_info("Dart entity and model files generated successfully.")
    return result
