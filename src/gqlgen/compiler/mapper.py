# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scalar type resolution and identifier naming.

A :class:`ScalarMapper` is immutable, per-compilation configuration: the
default tables below are read-only and user overrides are copied in at
construction, so concurrent or repeated compilations never interfere.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ###############
# Public Interface
# ###############

BUILTIN_SCALARS: frozenset[str] = frozenset({"String", "Int", "Float", "Boolean", "ID"})

# GraphQL scalar name -> target type name.
DEFAULT_SCALAR_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        "String": "string",
        "ID": "string",
        "Int": "int",
        "Float": "double",
        "Boolean": "bool",
    }
)

# Target type name -> GraphQL type used when declaring query variables.
DEFAULT_TARGET_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        "string": "String",
        "int": "Int!",
        "double": "Float!",
        "bool": "Boolean!",
    }
)

# Target for custom scalars that have neither an override nor a default.
DEFAULT_SCALAR_FALLBACK = "object"


class IdentifierStyle(enum.Enum):
    """Casing applied when turning a GraphQL name into a target identifier."""

    TYPE_MEMBER = "type_member"
    LOCAL_VARIABLE = "local_variable"


def to_identifier(name: str, style: IdentifierStyle) -> str:
    """Derive a target identifier from a GraphQL name.

    GraphQL names are restricted to ``[_A-Za-z][_0-9A-Za-z]*`` so no escaping
    is needed; only the first letter's case changes.

    >>> to_identifier("createUser", IdentifierStyle.TYPE_MEMBER)
    'CreateUser'
    >>> to_identifier("UserId", IdentifierStyle.LOCAL_VARIABLE)
    'userId'
    """
    if not name:
        return name
    if style == IdentifierStyle.TYPE_MEMBER:
        return name[0].upper() + name[1:]
    return name[0].lower() + name[1:]


def parse_mapping_argument(text: str | None) -> dict[str, str]:
    """Split a ``"Key=Value,Key2=Value2"`` argument into a dictionary.

    Pairs are split on ``,`` and each pair on ``=``; only the first two
    segments of a pair are used and pairs without ``=`` are ignored. Values
    containing ``,`` or ``=`` cannot be expressed in this format.
    """
    if not text:
        return {}
    result: dict[str, str] = {}
    for pair in text.split(","):
        parts = pair.split("=")
        if len(parts) >= 2:
            result[parts[0]] = parts[1]
    return result


@dataclass(frozen=True)
class ScalarMapper:
    """Resolves GraphQL type names to target type names.

    Attributes:
        overrides: User-supplied GraphQL name -> target name pairs.
        scalar_names: Custom scalars declared by the schema being compiled.
        defaults: Built-in GraphQL scalar -> target table.
        fallback: Target for custom scalars without an override or default.
    """

    overrides: Mapping[str, str] = field(default_factory=dict)
    scalar_names: frozenset[str] = frozenset()
    defaults: Mapping[str, str] = field(default_factory=lambda: DEFAULT_SCALAR_MAPPINGS)
    fallback: str = DEFAULT_SCALAR_FALLBACK

    def __post_init__(self) -> None:
        # Snapshot the caller's mappings so later changes to them have no effect.
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))
        object.__setattr__(self, "scalar_names", frozenset(self.scalar_names))

    def with_scalars(self, names: Iterable[str]) -> ScalarMapper:
        """Return a copy of this mapper that knows the given custom scalar names."""
        return ScalarMapper(
            overrides=self.overrides,
            scalar_names=frozenset(names),
            defaults=self.defaults,
            fallback=self.fallback,
        )

    def is_scalar(self, name: str) -> bool:
        """Return True for built-in and declared custom scalar names."""
        return name in BUILTIN_SCALARS or name in self.scalar_names

    def resolve_scalar(self, name: str) -> str:
        """Resolve a GraphQL type name to its target type name.

        Precedence: user override, then the default table, then the fallback
        for declared scalars. Any other name is a user-defined type and passes
        through as a type identifier.
        """
        if name in self.overrides:
            return self.overrides[name]
        if name in self.defaults:
            return self.defaults[name]
        if self.is_scalar(name):
            return self.fallback
        return to_identifier(name, IdentifierStyle.TYPE_MEMBER)

    def graphql_type_for(self, target: str) -> str | None:
        """Return the GraphQL type to declare a variable of *target* type with.

        Inverted user overrides take precedence over the default table.
        Returns None for targets that are neither.
        """
        for graphql_name, override_target in self.overrides.items():
            if override_target == target:
                return graphql_name
        return DEFAULT_TARGET_MAPPINGS.get(target)
