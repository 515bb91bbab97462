# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from schemadts.compiler.transform import GeneratorOptions
from schemadts.ts.context import DEFAULT_CONTEXT, Context

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemadts.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS = ("console", "json")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """The parsed generator configuration.

    Attributes:
        skip_deprecated_properties: Leave superseded properties out of emitted records.
        context: The ``@context`` namespaces, e.g. ``"https://schema.org"``.
        allow_string_classes: Classes whose values may also be bare strings.
        log_level: Minimum level of emitted log events.
        log_format: ``"console"`` or ``"json"``.
    """

    skip_deprecated_properties: bool = True
    context: str = DEFAULT_CONTEXT
    allow_string_classes: list[str] = field(default_factory=list)
    log_level: str = "WARNING"
    log_format: str = "console"

    def to_options(self) -> GeneratorOptions:
        """Return the generator options described by this configuration."""
        return GeneratorOptions(
            context=Context.parse(self.context),
            skip_deprecated_properties=self.skip_deprecated_properties,
            allow_string_classes=frozenset(self.allow_string_classes),
        )


def load_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the ``.schemadts.yaml`` file.

    Returns:
        A GeneratorConfig populated from the file; absent keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid, has unknown keys, or holds
            values of the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config key(s): {', '.join(map(str, unknown))}")

    config = GeneratorConfig()
    if "skip-deprecated-properties" in data:
        config.skip_deprecated_properties = _require_bool(data, "skip-deprecated-properties", source_label)
    if "context" in data:
        config.context = _require_string(data, "context", source_label)
        try:
            Context.parse(config.context)
        except ValueError as exc:
            raise ConfigError(f"{source_label}: {exc}") from exc
    if "allow-string-classes" in data:
        config.allow_string_classes = _require_string_list(data, "allow-string-classes", source_label)
    if "log-level" in data:
        config.log_level = _require_choice(data, "log-level", LOG_LEVELS, source_label, upper=True)
    if "log-format" in data:
        config.log_format = _require_choice(data, "log-format", LOG_FORMATS, source_label)
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset(
    {"skip-deprecated-properties", "context", "allow-string-classes", "log-level", "log-format"}
)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be a boolean")
    return value


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{source_label}: '{key}' must be a list of strings")
    return list(value)


def _require_choice(
    mapping: dict[str, object],
    key: str,
    choices: tuple[str, ...],
    source_label: str,
    *,
    upper: bool = False,
) -> str:
    value = _require_string(mapping, key, source_label)
    if upper:
        value = value.upper()
    if value not in choices:
        raise ConfigError(f"{source_label}: '{key}' must be one of {', '.join(choices)}")
    return value
