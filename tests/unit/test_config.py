"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from pydantic import ValidationError

from railgraph.config import (
    DiagramConfig,
    ModelsConfig,
    OutputFormat,
    RailgraphConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestDiagramConfig:
    """Test DiagramConfig model."""

    def test_defaults(self):
        config = DiagramConfig()
        assert config.hops == 0
        assert config.size is None
        assert config.show_label is False
        assert config.schema_version == ""

    def test_aliases(self):
        config = DiagramConfig(**{"hops": 2, "size": [8, 11], "showLabel": True, "schemaVersion": "42"})
        assert config.hops == 2
        assert config.size == (8, 11)
        assert config.show_label is True
        assert config.schema_version == "42"

    def test_negative_hops_rejected(self):
        with pytest.raises(ValidationError):
            DiagramConfig(hops=-1)

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValidationError):
            DiagramConfig(size=(0, 11))


class TestRailgraphConfig:
    """Test complete RailgraphConfig model."""

    def test_minimal_config(self):
        config = RailgraphConfig()
        assert config.output.format == OutputFormat.DOT
        assert config.models.brief is False
        assert config.logging.level == "warn"

    def test_config_from_dict(self):
        """Test config creation from dictionary."""
        config_data = {
            "diagram": {"hops": 3, "showLabel": True},
            "models": {"hideMagic": True, "onlySimpleEdge": True, "fontsize": 12},
            "output": {"format": "xmi"},
            "logging": {"level": "debug"},
        }

        config = RailgraphConfig(**config_data)
        assert config.diagram.hops == 3
        assert config.diagram.show_label is True
        assert config.models.hide_magic is True
        assert config.models.only_simple_edge is True
        assert config.models.fontsize == 12
        assert config.output.format == "xmi"
        assert config.logging.level == "debug"

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError):
            RailgraphConfig(**{"render": {}})

    def test_models_config_by_field_name(self):
        config = ModelsConfig(hide_types=True, all_classes=True)
        assert config.hide_types is True
        assert config.all_classes is True


class TestConfigLoading:
    """Test configuration loading functions."""

    def test_create_default_config(self):
        assert create_default_config() == RailgraphConfig()

    def test_load_config_from_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".railgraph.json"
            config_file.write_text(json.dumps({"diagram": {"hops": 2}}))

            config = load_config(config_file)

            assert config.diagram.hops == 2

    def test_load_config_missing_file_uses_defaults(self):
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nope.json")

            assert config == RailgraphConfig()

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".railgraph.json"
            config_file.write_text("{ invalid json }")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_content(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".railgraph.json"
            config_file.write_text(json.dumps({"diagram": {"hops": -3}}))

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_in_parent(self):
        with TemporaryDirectory() as temp_dir:
            root = Path(temp_dir).resolve()
            config_file = root / ".railgraph.json"
            config_file.write_text("{}")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            assert find_config_file(nested) == config_file

    def test_find_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            nested = Path(temp_dir) / "empty"
            nested.mkdir()

            found = find_config_file(nested)

            # Only a stray config above the temp dir could be found
            assert found is None or not str(found).startswith(str(Path(temp_dir).resolve()))
