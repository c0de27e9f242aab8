"""Unit tests for Config and related Pydantic models (entitygen.config).

Tests cover:
- NamingConfig / LayoutConfig defaults and validation
- Config defaults, derived paths (properties), save/load, from_env
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from entitygen.config import Config, LayoutConfig, NamingConfig, UnsupportedPolicy


# ---------------------------------------------------------------------------
# NamingConfig / LayoutConfig
# ---------------------------------------------------------------------------


class TestNamingConfig:
    @pytest.mark.unit
    def test_defaults(self):
        naming = NamingConfig()
        assert naming.entity_suffix == "Entity"
        assert naming.model_suffix == "Model"
        assert naming.qualify_nested_names is False
        assert naming.snake_case_filenames is False
        assert naming.unsupported_policy is UnsupportedPolicy.DEGRADE

    @pytest.mark.unit
    def test_policy_from_string(self):
        naming = NamingConfig(unsupported_policy="fail")
        assert naming.unsupported_policy is UnsupportedPolicy.FAIL

    @pytest.mark.unit
    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            NamingConfig(unsupported_policy="ignore")


class TestLayoutConfig:
    @pytest.mark.unit
    def test_defaults(self):
        layout = LayoutConfig()
        assert layout.file_extension == ".dart"
        assert layout.model_import_prefix == "../models/"
        assert layout.entity_import_prefix == "../../entities/"
        assert layout.hive_type_id is None

    @pytest.mark.unit
    def test_negative_hive_type_id_rejected(self):
        with pytest.raises(ValidationError):
            LayoutConfig(hive_type_id=-1)

    @pytest.mark.unit
    def test_zero_hive_type_id_allowed(self):
        assert LayoutConfig(hive_type_id=0).hive_type_id == 0


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.entity_dir is None
        assert config.model_dir is None
        assert isinstance(config.naming, NamingConfig)
        assert isinstance(config.layout, LayoutConfig)


class TestConfigDerivedPaths:
    @pytest.mark.unit
    def test_paths_fall_back_to_output_dir(self, tmp_path: Path):
        config = Config(output_dir=tmp_path)
        assert config.entity_path == tmp_path
        assert config.model_path == tmp_path

    @pytest.mark.unit
    def test_explicit_directories_win(self, tmp_path: Path):
        config = Config(
            output_dir=tmp_path,
            entity_dir=tmp_path / "entities",
            model_dir=tmp_path / "models",
        )
        assert config.entity_path == tmp_path / "entities"
        assert config.model_path == tmp_path / "models"


class TestConfigSaveLoad:
    @pytest.mark.unit
    def test_roundtrip(self, tmp_path: Path):
        config = Config(
            naming=NamingConfig(entity_suffix="Dto", qualify_nested_names=True),
            layout=LayoutConfig(hive_type_id=7),
            entity_dir=tmp_path / "e",
        )
        saved = config.save(tmp_path / "entitygen.json")

        loaded = Config.load(saved)
        assert loaded.naming.entity_suffix == "Dto"
        assert loaded.naming.qualify_nested_names is True
        assert loaded.layout.hive_type_id == 7
        assert loaded.entity_dir == tmp_path / "e"
        assert loaded.model_dir is None

    @pytest.mark.unit
    def test_save_writes_json(self, tmp_path: Path):
        saved = Config().save(tmp_path / "cfg.json")
        data = json.loads(saved.read_text(encoding="utf-8"))
        assert data["naming"]["unsupported_policy"] == "degrade"

    @pytest.mark.unit
    def test_save_creates_parent_dirs(self, tmp_path: Path):
        deep_path = tmp_path / "deep" / "nested" / "config.json"
        Config().save(deep_path)
        assert deep_path.exists()

    @pytest.mark.unit
    def test_load_invalid_file_raises(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"layout": {"hive_type_id": -5}}', encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(bad)


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config.naming == NamingConfig()
        assert config.layout == LayoutConfig()
        assert config.output_dir == Path(".")
        assert config.entity_dir is None

    @pytest.mark.unit
    def test_suffixes_from_env(self):
        env = {"ENTITYGEN_ENTITY_SUFFIX": "Dto", "ENTITYGEN_MODEL_SUFFIX": "Json"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.naming.entity_suffix == "Dto"
        assert config.naming.model_suffix == "Json"

    @pytest.mark.unit
    @pytest.mark.parametrize("value, expected", [("1", True), ("Yes", True), ("off", False)])
    def test_flags_from_env(self, value, expected):
        env = {
            "ENTITYGEN_QUALIFY_NESTED_NAMES": value,
            "ENTITYGEN_SNAKE_CASE_FILENAMES": value,
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.naming.qualify_nested_names is expected
        assert config.naming.snake_case_filenames is expected

    @pytest.mark.unit
    def test_policy_from_env(self):
        with patch.dict(os.environ, {"ENTITYGEN_UNSUPPORTED_POLICY": "FAIL"}, clear=True):
            config = Config.from_env()
        assert config.naming.unsupported_policy is UnsupportedPolicy.FAIL

    @pytest.mark.unit
    def test_hive_type_id_from_env(self):
        with patch.dict(os.environ, {"ENTITYGEN_HIVE_TYPE_ID": "12"}, clear=True):
            config = Config.from_env()
        assert config.layout.hive_type_id == 12

    @pytest.mark.unit
    def test_invalid_hive_type_id_from_env(self):
        with patch.dict(os.environ, {"ENTITYGEN_HIVE_TYPE_ID": "twelve"}, clear=True):
            with pytest.raises(ValueError):
                Config.from_env()

    @pytest.mark.unit
    def test_directories_from_env(self):
        env = {
            "ENTITYGEN_OUTPUT_DIR": "/work/out",
            "ENTITYGEN_ENTITY_DIR": "/work/lib/domain/entities",
            "ENTITYGEN_MODEL_DIR": "/work/lib/data/models",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.output_dir == Path("/work/out")
        assert config.entity_path == Path("/work/lib/domain/entities")
        assert config.model_path == Path("/work/lib/data/models")
