# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for gqlgen."""

from gqlgen.config.settings import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT,
    ConfigError,
    GeneratorConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
]
