# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while compiling a GraphQL schema into a type model.

Every error carries the kind of source it came from (``"sdl"``,
``"introspection"`` or ``"model"``), the offending name when there is one,
and a location: ``line L, column C`` for SDL text or a JSON path for
introspection data.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############

SOURCE_SDL = "sdl"
SOURCE_INTROSPECTION = "introspection"
SOURCE_MODEL = "model"


class CompileError(Exception):
    """Base class for all schema compilation errors.

    Attributes:
        source_kind: ``"sdl"``, ``"introspection"`` or ``"model"``.
        name: The offending type, field or token name, if any.
        location: Human-readable location of the problem, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        source_kind: str,
        name: str | None = None,
        location: str | None = None,
    ) -> None:
        prefix = source_kind
        if location:
            prefix += f", {location}"
        super().__init__(f"[{prefix}] {message}")
        self.source_kind = source_kind
        self.name = name
        self.location = location


class SchemaSyntaxError(CompileError):
    """Raised on SDL text that the grammar does not accept.

    Attributes:
        line: 1-based line number of the offending token.
        column: 1-based column number of the offending token.
    """

    def __init__(self, message: str, line: int, column: int, *, name: str | None = None) -> None:
        super().__init__(
            message,
            source_kind=SOURCE_SDL,
            name=name,
            location=f"line {line}, column {column}",
        )
        self.line = line
        self.column = column


class FormatError(CompileError):
    """Raised when introspection JSON is malformed or incomplete.

    Attributes:
        path: JSON path of the missing or mistyped member, e.g.
            ``types[2].fields[0].type``.
    """

    def __init__(self, message: str, path: str, *, name: str | None = None) -> None:
        super().__init__(message, source_kind=SOURCE_INTROSPECTION, name=name, location=path)
        self.path = path


class UnresolvedReferenceError(CompileError):
    """Raised when a type reference names a type absent from the model."""


class CollisionError(CompileError):
    """Raised when two source names normalize to the same target identifier.

    Attributes:
        first: The source name registered first.
        second: The source name that collided with it.
        identifier: The shared target identifier.
    """

    def __init__(
        self,
        first: str,
        second: str,
        identifier: str,
        *,
        scope: str | None = None,
        message: str | None = None,
        source_kind: str = SOURCE_MODEL,
        location: str | None = None,
    ) -> None:
        if message is None:
            where = f" in {scope}" if scope else ""
            if first == second:
                message = f"'{first}' is declared more than once{where}"
            else:
                message = f"'{first}' and '{second}' both map to identifier '{identifier}'{where}"
        super().__init__(message, source_kind=source_kind, name=second, location=location)
        self.first = first
        self.second = second
        self.identifier = identifier


class UnsupportedConstructError(CompileError):
    """Raised for an interface, union or non-core directive under the fail policy.

    Attributes:
        construct: The kind of construct, e.g. ``"interface"`` or ``"directive"``.
    """

    def __init__(
        self,
        construct: str,
        name: str | None,
        *,
        source_kind: str,
        location: str | None = None,
    ) -> None:
        label = f"{construct} '{name}'" if name else construct
        super().__init__(
            f"Unsupported construct: {label}",
            source_kind=source_kind,
            name=name,
            location=location,
        )
        self.construct = construct
