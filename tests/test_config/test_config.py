"""Tests for loading sort configuration."""

import json
import logging

import pytest

from concentric.config import SortConfig, config_from_mapping, load_config
from concentric.errors import ConfigError
from concentric.order import DEFAULT_ORDER


def _write(tmp_path, data) -> str:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# SortConfig
# ---------------------------------------------------------------------------


class TestSortConfig:
    def test_defaults(self):
        config = SortConfig()
        assert config.filter_blank_lines is False
        assert config.custom_order is None
        assert config.priority_index().names == DEFAULT_ORDER

    def test_custom_order_replaces_default(self):
        config = SortConfig(custom_order=("color", "display"))
        index = config.priority_index()
        assert index.names == ("color", "display")
        assert index.rank_of("position") is None

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            SortConfig().filter_blank_lines = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# config_from_mapping
# ---------------------------------------------------------------------------


class TestConfigFromMapping:
    def test_flat_keys(self):
        config = config_from_mapping(
            {
                "sortConcentrically.filterBlankLines": True,
                "sortConcentrically.customOrder": ["color", "display"],
                "editor.tabSize": 2,
            }
        )
        assert config == SortConfig(filter_blank_lines=True, custom_order=("color", "display"))

    def test_nested_section(self):
        config = config_from_mapping(
            {"sortConcentrically": {"filterBlankLines": True, "customOrder": ["top"]}}
        )
        assert config == SortConfig(filter_blank_lines=True, custom_order=("top",))

    def test_flat_key_wins_over_nested(self):
        config = config_from_mapping(
            {
                "sortConcentrically.customOrder": ["a"],
                "sortConcentrically": {"customOrder": ["b"]},
            }
        )
        assert config.custom_order == ("a",)

    def test_empty_mapping(self):
        assert config_from_mapping({}) == SortConfig()

    def test_custom_order_not_a_list_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="concentric.config"):
            config = config_from_mapping({"sortConcentrically.customOrder": "display"})
        assert config.custom_order is None
        assert "customOrder" in caplog.text

    def test_custom_order_with_non_strings_falls_back(self):
        config = config_from_mapping({"sortConcentrically.customOrder": ["display", 3]})
        assert config.custom_order is None
        assert config.priority_index().names == DEFAULT_ORDER

    def test_empty_custom_order_is_kept(self):
        config = config_from_mapping({"sortConcentrically.customOrder": []})
        assert config.custom_order == ()
        index = config.priority_index()
        assert len(index) == 0
        assert index.rank_of("display") is None

    def test_non_bool_filter_blank_is_false(self, caplog):
        with caplog.at_level(logging.WARNING, logger="concentric.config"):
            config = config_from_mapping({"sortConcentrically.filterBlankLines": "yes"})
        assert config.filter_blank_lines is False
        assert "filterBlankLines" in caplog.text

    def test_non_object_settings(self):
        assert config_from_mapping(["not", "an", "object"]) == SortConfig()  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_no_path_gives_defaults(self):
        assert load_config() == SortConfig()

    def test_reads_file(self, tmp_path):
        path = _write(tmp_path, {"sortConcentrically.customOrder": ["color"]})
        assert load_config(path).custom_order == ("color",)

    def test_accepts_path_object(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text('{"sortConcentrically": {"filterBlankLines": true}}', encoding="utf-8")
        assert load_config(path).filter_blank_lines is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)
