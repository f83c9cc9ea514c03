"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from docformat.deep_merge import deep_merge
from docformat.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3]})
    assert merged == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["html"]["breadcrumb_separator"] == "&nbsp;/&nbsp;"

    config["html"]["css"] = "changed.css"
    assert DEFAULT_CONFIG["html"]["css"] is None


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "docformat.yml"
    config_file.write_text(yaml.dump({"html": {"css": "style.css"}}))

    loaded = load_config(config_file)
    assert loaded["html"]["css"] == "style.css"
    assert loaded["html"]["breadcrumb_separator"] == "&nbsp;/&nbsp;"
    assert loaded["format"] == "html"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty file yields the defaults."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_load_config_missing_file_warns(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a missing file falls back to defaults with a warning."""
    with caplog.at_level(logging.WARNING, logger="docformat.load_config"):
        config = load_config(tmp_path / "absent.yml")
    assert config == DEFAULT_CONFIG
    assert "not found" in caplog.text


def test_load_config_malformed_yaml(tmp_path: Path) -> None:
    """Verify that malformed YAML is reported to the caller."""
    config_file = tmp_path / "bad.yml"
    config_file.write_text("html: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(config_file)
