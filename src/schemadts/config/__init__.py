# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration."""

from schemadts.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    GeneratorConfig,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
    "parse_config",
]
