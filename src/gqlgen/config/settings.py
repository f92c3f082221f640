# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the gqlgen project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from gqlgen.compiler.artifact import ARTIFACT_SUFFIX
from gqlgen.compiler.declarations import UnsupportedPolicy
from gqlgen.compiler.mapper import DEFAULT_SCALAR_FALLBACK

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".gqlgen.yaml"

DEFAULT_OUTPUT = f"output/schema{ARTIFACT_SUFFIX}"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """The parsed gqlgen configuration.

    Attributes:
        output: Path of the model artifact to write.
        scalar_mapping: GraphQL scalar name -> target type name overrides.
        default_scalar: Target type for custom scalars without a mapping.
        unsupported_constructs: Policy for interfaces, unions and non-core directives.
        headers: HTTP headers sent when introspecting an endpoint.
    """

    output: str = DEFAULT_OUTPUT
    scalar_mapping: dict[str, str] = field(default_factory=dict)
    default_scalar: str = DEFAULT_SCALAR_FALLBACK
    unsupported_constructs: UnsupportedPolicy = UnsupportedPolicy.SKIP
    headers: dict[str, str] = field(default_factory=dict)


def load_config(path: Path) -> GeneratorConfig:
    """Load and parse a gqlgen configuration file.

    Args:
        path: Path to the ``.gqlgen.yaml`` file.

    Returns:
        A GeneratorConfig populated from the file, with defaults for absent keys.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a key has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    config = GeneratorConfig()
    if "output" in data:
        config.output = _require_string(data, "output", source_label)
    if "scalar-mapping" in data:
        config.scalar_mapping = _require_string_mapping(data, "scalar-mapping", source_label)
    if "default-scalar" in data:
        config.default_scalar = _require_string(data, "default-scalar", source_label)
    if "unsupported-constructs" in data:
        value = _require_string(data, "unsupported-constructs", source_label)
        try:
            config.unsupported_constructs = UnsupportedPolicy(value)
        except ValueError:
            raise ConfigError(
                f"{source_label}: 'unsupported-constructs' must be 'skip' or 'fail', got {value!r}"
            ) from None
    if "headers" in data:
        config.headers = _require_string_mapping(data, "headers", source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ConfigError if it is not one."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_string_mapping(mapping: dict[str, object], key: str, source_label: str) -> dict[str, str]:
    """Extract a mapping of strings to strings, raising ConfigError on any other shape."""
    value = mapping[key]
    if not isinstance(value, dict):
        raise ConfigError(f"{source_label}: '{key}' must be a mapping")
    result: dict[str, str] = {}
    for entry_key, entry_value in value.items():
        if not isinstance(entry_key, str) or not isinstance(entry_value, str):
            raise ConfigError(f"{source_label}: '{key}' entries must map strings to strings ({entry_key!r})")
        result[entry_key] = entry_value
    return result
