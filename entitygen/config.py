"""entitygen configuration.

Typed configuration for the inferencer, the emitter and the host layer.  All
settings use Pydantic v2 models so they are validated at construction time and
can be serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class UnsupportedPolicy(str, Enum):
    """What the inferencer does with a value it cannot classify."""
    DEGRADE = "degrade"
    FAIL = "fail"


class NamingConfig(BaseModel):
    """Class naming and inference policy."""

    entity_suffix: str = Field(default="Entity", description="Suffix for entity and nested classes")
    model_suffix: str = Field(default="Model", description="Suffix for the serialization model class")
    qualify_nested_names: bool = Field(
        default=False,
        description="Prefix nested class names with their parent's base name",
    )
    snake_case_filenames: bool = Field(
        default=False,
        description="Snake-case the file stem instead of plain lower-casing it",
    )
    unsupported_policy: UnsupportedPolicy = Field(
        default=UnsupportedPolicy.DEGRADE,
        description="'degrade' to an unknown type or 'fail' the run",
    )


class LayoutConfig(BaseModel):
    """Target file layout and annotations of the emitted Dart code."""

    file_extension: str = Field(default=".dart")
    model_import_prefix: str = Field(
        default="../models/", description="Import prefix used by entity files to reach models"
    )
    entity_import_prefix: str = Field(
        default="../../entities/", description="Import prefix used by model files to reach entities"
    )
    hive_type_id: Optional[int] = Field(
        default=None, ge=0, description="Emit Hive annotations with this typeId when set"
    )


class Config(BaseModel):
    """Global entitygen configuration.

    Instances are created once by the CLI (or by library callers) and passed
    to ``EntityGenerator`` and the session host.
    """

    naming: NamingConfig = Field(default_factory=NamingConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output_dir: Path = Field(default=Path("."))
    entity_dir: Optional[Path] = Field(default=None)
    model_dir: Optional[Path] = Field(default=None)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def entity_path(self) -> Path:
        """Directory receiving entity and nested value-class files."""
        return self.entity_dir or self.output_dir

    @property
    def model_path(self) -> Path:
        """Directory receiving the model file."""
        return self.model_dir or self.output_dir

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ENTITYGEN_ENTITY_SUFFIX, ENTITYGEN_MODEL_SUFFIX,
            ENTITYGEN_QUALIFY_NESTED_NAMES, ENTITYGEN_SNAKE_CASE_FILENAMES,
            ENTITYGEN_UNSUPPORTED_POLICY, ENTITYGEN_HIVE_TYPE_ID,
            ENTITYGEN_OUTPUT_DIR, ENTITYGEN_ENTITY_DIR, ENTITYGEN_MODEL_DIR.
        """
        naming_kwargs: dict[str, Any] = {}
        if os.environ.get("ENTITYGEN_ENTITY_SUFFIX"):
            naming_kwargs["entity_suffix"] = os.environ["ENTITYGEN_ENTITY_SUFFIX"]
        if os.environ.get("ENTITYGEN_MODEL_SUFFIX"):
            naming_kwargs["model_suffix"] = os.environ["ENTITYGEN_MODEL_SUFFIX"]
        if os.environ.get("ENTITYGEN_QUALIFY_NESTED_NAMES"):
            naming_kwargs["qualify_nested_names"] = _env_flag("ENTITYGEN_QUALIFY_NESTED_NAMES")
        if os.environ.get("ENTITYGEN_SNAKE_CASE_FILENAMES"):
            naming_kwargs["snake_case_filenames"] = _env_flag("ENTITYGEN_SNAKE_CASE_FILENAMES")
        if os.environ.get("ENTITYGEN_UNSUPPORTED_POLICY"):
            naming_kwargs["unsupported_policy"] = os.environ["ENTITYGEN_UNSUPPORTED_POLICY"].lower()

        layout_kwargs: dict[str, Any] = {}
        if os.environ.get("ENTITYGEN_HIVE_TYPE_ID"):
            layout_kwargs["hive_type_id"] = int(os.environ["ENTITYGEN_HIVE_TYPE_ID"])

        entity_dir = os.environ.get("ENTITYGEN_ENTITY_DIR")
        model_dir = os.environ.get("ENTITYGEN_MODEL_DIR")

        return cls(
            naming=NamingConfig(**naming_kwargs),
            layout=LayoutConfig(**layout_kwargs),
            output_dir=Path(os.environ.get("ENTITYGEN_OUTPUT_DIR", ".")),
            entity_dir=Path(entity_dir) if entity_dir else None,
            model_dir=Path(model_dir) if model_dir else None,
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")
