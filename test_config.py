"""
Tests for the configuration layer and how the parser reads it.
"""

import json

import pytest

from markup_engine.parser import HTMLParser
from markup_engine.utils.config import DEFAULT_MAX_DEPTH, Config, validate_max_depth


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


def test_missing_file_uses_defaults(config_path):
    config = Config(config_path)
    assert config.get("parser.max_depth") == DEFAULT_MAX_DEPTH
    assert config.get("output.format") == "tree"
    assert config.get("logging.log_file") is None
    assert config.get("no.such.key", "fallback") == "fallback"


def test_save_and_reload(config_path):
    config = Config(config_path)
    config.set("parser.max_depth", 10)
    config.set("custom.nested.value", "x")
    config.save()

    reloaded = Config(config_path)
    assert reloaded.get_max_depth() == 10
    assert reloaded.get("custom.nested.value") == "x"
    assert reloaded.get("output.indent") == 2


def test_partial_file_is_merged_with_defaults(config_path):
    with open(config_path, "w") as f:
        json.dump({"output": {"format": "json"}}, f)

    config = Config(config_path)
    assert config.get("output.format") == "json"
    assert config.get("output.indent") == 2
    assert config.get_max_depth() == DEFAULT_MAX_DEPTH


def test_malformed_file_falls_back_to_defaults(config_path, caplog):
    with open(config_path, "w") as f:
        f.write("{not json")

    config = Config(config_path)
    assert config.get("parser.max_depth") == DEFAULT_MAX_DEPTH
    assert "Error loading configuration" in caplog.text


def test_remove_and_get_all(config_path):
    config = Config(config_path)
    assert config.remove("output.indent")
    assert not config.remove("output.indent")
    assert not config.remove("missing.key")
    everything = config.get_all()
    assert "indent" not in everything["output"]
    everything["parser"]["max_depth"] = 1
    assert config.get_max_depth() == DEFAULT_MAX_DEPTH


def test_parser_reads_max_depth_from_config(config_path):
    config = Config(config_path)
    config.set("parser.max_depth", 10)
    assert HTMLParser(config=config).max_depth == 10
    assert HTMLParser(config=config, max_depth=3).max_depth == 3
    assert HTMLParser().max_depth == DEFAULT_MAX_DEPTH


@pytest.mark.parametrize("value", [0, -1, "10", 2.5, True, None])
def test_invalid_depths_are_rejected(config_path, value):
    with pytest.raises(ValueError):
        validate_max_depth(value)

    config = Config(config_path)
    config.set("parser.max_depth", value)
    with pytest.raises(ValueError):
        HTMLParser(config=config)
