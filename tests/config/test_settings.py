# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the gqlgen configuration module."""

from pathlib import Path

import pytest

from gqlgen.compiler.artifact import ARTIFACT_SUFFIX
from gqlgen.compiler.declarations import UnsupportedPolicy
from gqlgen.config import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT,
    ConfigError,
    GeneratorConfig,
    load_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == GeneratorConfig()
    assert config.output == DEFAULT_OUTPUT
    assert config.default_scalar == "object"
    assert config.unsupported_constructs == UnsupportedPolicy.SKIP


def test_full_config(tmp_path: Path) -> None:
    """Every supported key is parsed."""
    content = """\
output: build/model.gqlmodel.json
scalar-mapping:
  ID: Guid
  DateTime: DateTimeOffset
default-scalar: dynamic
unsupported-constructs: fail
headers:
  Authorization: Bearer abc
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.output == "build/model.gqlmodel.json"
    assert config.scalar_mapping == {"ID": "Guid", "DateTime": "DateTimeOffset"}
    assert config.default_scalar == "dynamic"
    assert config.unsupported_constructs == UnsupportedPolicy.FAIL
    assert config.headers == {"Authorization": "Bearer abc"}


def test_defaults_are_independent() -> None:
    """Each GeneratorConfig gets its own mapping instances."""
    first = GeneratorConfig()
    first.scalar_mapping["ID"] = "Guid"
    assert GeneratorConfig().scalar_mapping == {}


def test_default_output_uses_artifact_suffix() -> None:
    """The default output path ends with the artifact file suffix."""
    assert DEFAULT_OUTPUT.endswith(ARTIFACT_SUFFIX)
    assert GeneratorConfig().output == f"output/schema{ARTIFACT_SUFFIX}"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing config file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError naming the file."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "output: [unclosed\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(_write_config(tmp_path, "- output\n"))


def test_output_must_be_string(tmp_path: Path) -> None:
    """A non-string output path is rejected."""
    with pytest.raises(ConfigError, match="'output' must be a string"):
        load_config(_write_config(tmp_path, "output: 42\n"))


def test_scalar_mapping_must_be_mapping(tmp_path: Path) -> None:
    """scalar-mapping given as a list is rejected."""
    with pytest.raises(ConfigError, match="'scalar-mapping' must be a mapping"):
        load_config(_write_config(tmp_path, "scalar-mapping:\n  - ID\n"))


def test_scalar_mapping_values_must_be_strings(tmp_path: Path) -> None:
    """Non-string mapping values are rejected."""
    with pytest.raises(ConfigError, match="must map strings to strings"):
        load_config(_write_config(tmp_path, "scalar-mapping:\n  Int: 64\n"))


def test_unknown_policy(tmp_path: Path) -> None:
    """Only 'skip' and 'fail' are valid policies."""
    with pytest.raises(ConfigError, match="'skip' or 'fail'"):
        load_config(_write_config(tmp_path, "unsupported-constructs: ignore\n"))
