"""Tests for the EntityGenerator façade (generate + write)."""

from __future__ import annotations

from pathlib import Path

import pytest

from entitygen.config import Config
from entitygen.emitter import Layer
from entitygen.errors import InvalidInputKind
from entitygen.generator import EntityGenerator, GenerationResult


pytestmark = pytest.mark.unit


class TestGenerate:
    def test_result_fields(self, nested_document):
        result = EntityGenerator().generate("User", nested_document)

        assert isinstance(result, GenerationResult)
        assert result.root_class_name == "UserEntity"
        assert result.model_class_name == "UserModel"
        assert result.schema_names == ["AddressEntity", "ItemsEntity", "UserEntity"]
        assert result.collisions == []
        assert list(result.as_mapping()) == [
            "address_entity.dart",
            "items_entity.dart",
            "user_entity.dart",
            "user_model.dart",
        ]

    def test_files_for_layer(self, nested_document):
        result = EntityGenerator().generate("User", nested_document)
        assert [f.identifier for f in result.files_for(Layer.MODEL)] == ["user_model.dart"]
        assert len(result.files_for(Layer.ENTITY)) == 3

    def test_collisions_reported(self):
        result = EntityGenerator().generate(
            "Response", {"data": {"x": 1}, "meta": {"data": {"y": "s"}}}
        )
        assert result.collisions == ["DataEntity"]

    def test_invalid_root_propagates(self):
        with pytest.raises(InvalidInputKind):
            EntityGenerator().generate("User", [1, 2, 3])

    def test_bare_suffix_class_name(self):
        result = EntityGenerator().generate("Entity", {"uuid": "abc"})
        assert result.root_class_name == "Entity"
        assert result.model_class_name == "EntityModel"
        assert list(result.as_mapping()) == ["entity.dart", "entity_model.dart"]
        assert "class Entity {" in result.as_mapping()["entity.dart"]

    def test_runs_are_independent(self):
        generator = EntityGenerator()
        first = generator.generate("A", {"x": {"y": 1}})
        second = generator.generate("B", {"z": True})
        assert first.schema_names == ["XEntity", "AEntity"]
        assert second.schema_names == ["BEntity"]


class TestWrite:
    async def test_single_directory(self, tmp_path: Path, nested_document):
        generator = EntityGenerator()
        result = generator.generate("User", nested_document)

        written = await generator.write(result, tmp_path)

        assert sorted(p.name for p in written) == sorted(result.as_mapping())
        assert (tmp_path / "user_model.dart").read_text(encoding="utf-8") == (
            result.as_mapping()["user_model.dart"]
        )

    async def test_split_directories(self, tmp_path: Path, nested_document):
        generator = EntityGenerator()
        result = generator.generate("User", nested_document)
        entity_dir = tmp_path / "domain" / "entities"
        model_dir = tmp_path / "data" / "models"

        await generator.write(result, entity_dir, model_dir)

        assert sorted(p.name for p in entity_dir.iterdir()) == [
            "address_entity.dart",
            "items_entity.dart",
            "user_entity.dart",
        ]
        assert [p.name for p in model_dir.iterdir()] == ["user_model.dart"]

    async def test_configured_directories(self, tmp_path: Path):
        config = Config(entity_dir=tmp_path / "e", model_dir=tmp_path / "m")
        generator = EntityGenerator(config)
        result = generator.generate("User", {"uuid": "abc"})

        await generator.write(result)

        assert (tmp_path / "e" / "user_entity.dart").exists()
        assert (tmp_path / "m" / "user_model.dart").exists()

    async def test_rewrite_overwrites(self, tmp_path: Path):
        generator = EntityGenerator()
        target = tmp_path / "user_entity.dart"
        target.write_text("stale", encoding="utf-8")

        await generator.write(generator.generate("User", {"uuid": "abc"}), tmp_path)

        assert "class UserEntity" in target.read_text(encoding="utf-8")
