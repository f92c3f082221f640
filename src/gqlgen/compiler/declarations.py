# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw type declarations shared by the SDL parser and the introspection decoder.

Both input encodings are decoded into a :class:`RawSchema` of exactly this
shape, so the type model builder never needs to know which one it came from.
Source locations are kept for error reporting but are excluded from equality.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from gqlgen.compiler.errors import UnsupportedConstructError
from gqlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############


class DeclarationKind(enum.Enum):
    """The declaration kinds the type model is built from."""

    OBJECT = "object"
    INPUT = "input"
    ENUM = "enum"
    SCALAR = "scalar"


class UnsupportedPolicy(enum.Enum):
    """What to do with interfaces, unions and non-core directives.

    SKIP consumes the construct and records it; FAIL raises
    :class:`~gqlgen.compiler.errors.UnsupportedConstructError` on the first one.
    """

    SKIP = "skip"
    FAIL = "fail"


@dataclass(frozen=True)
class SkippedConstruct:
    """A construct that was recognized but not processed.

    Attributes:
        kind: e.g. ``"interface"``, ``"union"``, ``"directive"``.
        name: The construct's name, if it has one.
        location: Where it was found (line/column or JSON path).
    """

    kind: str
    name: str | None
    location: str | None = field(default=None, compare=False)

    @property
    def message(self) -> str:
        """Human-readable description for diagnostics output."""
        label = f"{self.kind} '{self.name}'" if self.name else self.kind
        where = f" at {self.location}" if self.location else ""
        return f"Skipped unsupported {label}{where}"


@dataclass(frozen=True)
class RawArgument:
    """An argument of a field, before name and scalar resolution."""

    name: str
    type: TypeRef
    default_value: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RawField:
    """A field of an object or input declaration, before resolution."""

    name: str
    type: TypeRef
    args: tuple[RawArgument, ...] = ()
    default_value: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RawDeclaration:
    """One object, input, enum or scalar declaration.

    Only the members relevant to ``kind`` are populated: ``fields`` for
    objects and inputs, ``values`` for enums.
    """

    kind: DeclarationKind
    name: str
    fields: tuple[RawField, ...] = ()
    values: tuple[str, ...] = ()
    description: str | None = None
    location: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class RawSchema:
    """The raw declarations of one schema in source order.

    Attributes:
        declarations: Object, input, enum and scalar declarations.
        query_root: Declared query root type name, or None if not declared.
        mutation_root: Declared mutation root type name, or None.
        skipped: Constructs that were recognized but not processed.
        source_kind: The encoding the schema was read from, for error reports.
    """

    declarations: tuple[RawDeclaration, ...] = ()
    query_root: str | None = None
    mutation_root: str | None = None
    skipped: tuple[SkippedConstruct, ...] = field(default=(), compare=False)
    source_kind: str | None = field(default=None, compare=False)

    def of_kind(self, kind: DeclarationKind) -> list[RawDeclaration]:
        """Return the declarations of one kind, in source order."""
        return [d for d in self.declarations if d.kind == kind]


def record_unsupported(
    policy: UnsupportedPolicy,
    skipped: list[SkippedConstruct],
    construct: str,
    name: str | None,
    *,
    source_kind: str,
    location: str | None,
) -> None:
    """Apply *policy* to one unsupported construct.

    Appends a :class:`SkippedConstruct` to *skipped* under SKIP, raises under FAIL.

    Raises:
        UnsupportedConstructError: If *policy* is FAIL.
    """
    if policy == UnsupportedPolicy.FAIL:
        raise UnsupportedConstructError(construct, name, source_kind=source_kind, location=location)
    skipped.append(SkippedConstruct(kind=construct, name=name, location=location))
