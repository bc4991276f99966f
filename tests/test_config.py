"""
Tests for configuration loading.
"""

import json
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from locscan.config import DEFAULT_CONFIG, Config, find_config


class TestConfig:
    """Tests for Config.load and its accessors."""

    def test_defaults(self):
        config = Config.load(None)

        assert config.data == DEFAULT_CONFIG
        assert "kotlin" in config.languages()
        assert config.offset() == 0
        assert config.node_types("kotlin") == []
        assert config.display_text_max_length() == 80
        assert config.log_level() == "WARNING"

    def test_yaml_overrides_are_merged(self, tmp_path):
        """Test that YAML values override defaults key by key."""
        path = tmp_path / "locscan.yaml"
        path.write_text(
            "locate:\n"
            "  offset: 4\n"
            "  node_types:\n"
            "    kotlin: [call_expression]\n"
            "reporting:\n"
            "  format: json\n"
            "logging:\n"
            "  level: debug\n",
            encoding="utf-8",
        )

        config = Config.load(str(path))

        assert config.offset() == 4
        assert config.node_types("kotlin") == ["call_expression"]
        assert config.node_types("python") == []
        assert config.reporting()["format"] == "json"
        assert config.display_text_max_length() == 80
        assert config.log_level() == "DEBUG"
        assert config.languages() == set(DEFAULT_CONFIG["languages"]["enabled"])

    def test_json_config(self, tmp_path):
        path = tmp_path / "locscan.json"
        path.write_text(json.dumps({"languages": {"enabled": ["python"]}}), encoding="utf-8")

        assert Config.load(str(path)).languages() == {"python"}

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "locscan.yml"
        path.write_text("", encoding="utf-8")

        assert Config.load(str(path)).data == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load(str(tmp_path / "nope.yaml"))

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "locscan.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError):
            Config.load(str(path))

    def test_node_types_must_be_a_mapping(self, tmp_path):
        """Test that a list of node types without languages is rejected."""
        path = tmp_path / "locscan.yaml"
        path.write_text("locate:\n  node_types: [call_expression]\n", encoding="utf-8")

        with pytest.raises(ValueError, match="locate.node_types"):
            Config.load(str(path))

    def test_node_types_values_must_be_lists(self, tmp_path):
        path = tmp_path / "locscan.json"
        path.write_text(json.dumps({"locate": {"node_types": {"kotlin": "call"}}}), encoding="utf-8")

        with pytest.raises(ValueError):
            Config.load(str(path))

    def test_locate_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "locscan.yaml"
        path.write_text("locate: 3\n", encoding="utf-8")

        with pytest.raises(ValueError, match="locate must be a mapping"):
            Config.load(str(path))


class TestFindConfig:
    """Tests for config file discovery."""

    def test_finds_hidden_yaml_first(self, tmp_path):
        (tmp_path / "locscan.yaml").write_text("{}", encoding="utf-8")
        (tmp_path / ".locscan.yaml").write_text("{}", encoding="utf-8")

        assert find_config(str(tmp_path)) == str(tmp_path / ".locscan.yaml")

    def test_start_may_be_a_file(self, tmp_path):
        source = tmp_path / "Sample.kt"
        source.write_text("}", encoding="utf-8")
        (tmp_path / "locscan.json").write_text("{}", encoding="utf-8")

        assert find_config(str(source)) == str(tmp_path / "locscan.json")

    def test_nothing_found(self, tmp_path):
        assert find_config(str(tmp_path)) is None
