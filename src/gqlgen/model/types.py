# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type reference representations for the gqlgen type model.

A GraphQL type reference is a named type wrapped in any number of list and
non-null layers, e.g. ``[[Int!]]!``. Both the SDL parser and the
introspection decoder produce the same tagged variant defined here.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class NamedTypeRef(BaseModel):
    """Reference to a named scalar, enum, object or input type.

    Attributes:
        name: The GraphQL type name as declared in the schema.
        target: The resolved target type name. ``None`` until the type model
            builder has run the name through the scalar mapper.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str
    target: str | None = None


class ListTypeRef(BaseModel):
    """Reference to a list of the wrapped type (``[T]``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    of_type: TypeRef


class NonNullTypeRef(BaseModel):
    """Reference to a non-null variant of the wrapped type (``T!``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["non_null"] = "non_null"
    of_type: TypeRef

    @field_validator("of_type")
    @classmethod
    def _reject_double_non_null(cls, value: TypeRef) -> TypeRef:
        if isinstance(value, NonNullTypeRef):
            raise ValueError("non-null cannot wrap a non-null type")
        return value


# The `kind` discriminator keeps (de)serialization of nested references unambiguous.
TypeRef = Annotated[
    NamedTypeRef | ListTypeRef | NonNullTypeRef,
    _Field(discriminator="kind"),
]


def base_type(ref: TypeRef) -> NamedTypeRef:
    """Return the innermost named type of a possibly wrapped reference."""
    while not isinstance(ref, NamedTypeRef):
        ref = ref.of_type
    return ref


def is_non_null(ref: TypeRef) -> bool:
    """Return True if the outermost layer of *ref* is non-null."""
    return isinstance(ref, NonNullTypeRef)


def is_list(ref: TypeRef) -> bool:
    """Return True if *ref* is a list, ignoring an outer non-null layer."""
    if isinstance(ref, NonNullTypeRef):
        ref = ref.of_type
    return isinstance(ref, ListTypeRef)


def render_type_ref(ref: TypeRef, *, target: bool = False) -> str:
    """Render a type reference in SDL notation.

    Args:
        ref: The reference to render.
        target: Render the resolved target name instead of the GraphQL name
            for the innermost named type (falls back to the GraphQL name when
            no target has been resolved yet).

    Returns:
        A string such as ``[[Int!]]!``.
    """
    if isinstance(ref, NonNullTypeRef):
        return render_type_ref(ref.of_type, target=target) + "!"
    if isinstance(ref, ListTypeRef):
        return "[" + render_type_ref(ref.of_type, target=target) + "]"
    if target and ref.target is not None:
        return ref.target
    return ref.name


# Resolve forward references for models that use TypeRef.
ListTypeRef.model_rebuild()
NonNullTypeRef.model_rebuild()
