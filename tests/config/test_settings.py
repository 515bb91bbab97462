# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generator configuration file."""

from pathlib import Path

import pytest

from schemadts.config import ConfigError, GeneratorConfig, load_config, parse_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / ".schemadts.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """An empty config file parses to the default configuration."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == GeneratorConfig()
    assert config.skip_deprecated_properties is True
    assert config.context == "https://schema.org"
    assert config.allow_string_classes == []
    assert config.log_level == "WARNING"
    assert config.log_format == "console"


def test_full_config(tmp_path: Path) -> None:
    """Every supported key is read."""
    content = """\
skip-deprecated-properties: false
context: "schema:https://schema.org"
allow-string-classes:
  - Thing
  - Place
log-level: debug
log-format: json
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.skip_deprecated_properties is False
    assert config.context == "schema:https://schema.org"
    assert config.allow_string_classes == ["Thing", "Place"]
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"


def test_to_options() -> None:
    """The configuration converts into generator options."""
    options = parse_config("allow-string-classes: [Thing]\nskip-deprecated-properties: false\n").to_options()
    assert options.allow_string_classes == frozenset({"Thing"})
    assert options.skip_deprecated_properties is False
    assert options.context.namespaces == [("", "https://schema.org")]


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml() -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config("context: [unclosed\n")


def test_non_mapping_document() -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_config("- a\n- b\n")


def test_unknown_key() -> None:
    with pytest.raises(ConfigError, match="unknown config key\\(s\\): output"):
        parse_config("output: types.ts\n")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("skip-deprecated-properties: maybe\n", "must be a boolean"),
        ("context: 42\n", "must be a string"),
        ("allow-string-classes: Thing\n", "must be a list of strings"),
        ("allow-string-classes: [1, 2]\n", "must be a list of strings"),
        ("log-level: loud\n", "must be one of"),
        ("log-format: xml\n", "must be one of"),
    ],
)
def test_wrongly_typed_values(content: str, message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        parse_config(content)


def test_invalid_context() -> None:
    with pytest.raises(ConfigError, match="repeats a prefix"):
        parse_config('context: "a:https://a.org,a:https://b.org"\n')


def test_errors_name_the_source(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "log-format: xml\n")
    with pytest.raises(ConfigError, match=str(path.name)):
        load_config(path)
