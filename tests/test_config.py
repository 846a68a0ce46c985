"""
Tests for YAML configuration loading.
"""

from pathlib import Path

import pytest

from sealring.config import DEFAULT_HISTORY_LIMIT, DEFAULT_TOLERANCE_NOTE, DrawingConfig
from sealring.exceptions import ConfigError


class TestDrawingConfig:
    """Tests for DrawingConfig."""

    def test_defaults(self):
        config = DrawingConfig()
        assert config.unit == "mm"
        assert config.history_limit == DEFAULT_HISTORY_LIMIT == 100
        assert config.tolerance_grade_note == DEFAULT_TOLERANCE_NOTE
        assert config.detail_a_uses_record_angle is False

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "sealring.yaml"
        config_file.write_text(
            "unit: in\n"
            "default_company_name: ACME Seals Ltd.\n"
            "history_limit: 5\n"
            "detail_a_uses_record_angle: true\n",
            encoding="utf-8",
        )
        config = DrawingConfig.from_yaml(config_file)
        assert config.unit == "in"
        assert config.default_company_name == "ACME Seals Ltd."
        assert config.history_limit == 5
        assert config.detail_a_uses_record_angle is True
        assert config.output_dir == "."

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")
        assert DrawingConfig.from_yaml(config_file) == DrawingConfig()

    def test_yaml_roundtrip(self, tmp_path):
        config = DrawingConfig(unit="in", history_path=str(tmp_path / "h.json"), log_level="INFO")
        config.to_yaml(tmp_path / "out.yaml")
        assert DrawingConfig.from_yaml(tmp_path / "out.yaml") == config

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("units: mm\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="units"):
            DrawingConfig.from_yaml(config_file)

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- mm\n- in\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            DrawingConfig.from_yaml(config_file)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("unit: [mm\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            DrawingConfig.from_yaml(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            DrawingConfig.from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("text, key", [
        ("history_limit: ten\n", "history_limit"),
        ("history_limit: true\n", "history_limit"),
        ("detail_a_uses_record_angle: yes please\n", "detail_a_uses_record_angle"),
        ("unit: [mm, in]\n", "unit"),
    ])
    def test_wrong_value_type(self, tmp_path, text, key):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError, match=key):
            DrawingConfig.from_yaml(config_file)

    def test_history_limit_positive(self):
        with pytest.raises(ConfigError):
            DrawingConfig(history_limit=0)

    def test_history_path_expanded(self):
        path = DrawingConfig(history_path="~/h.json").resolved_history_path
        assert path == Path.home() / "h.json"
