# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Definitions that make up a compiled gqlgen type model."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from gqlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############


class ArgDef(BaseModel):
    """An argument accepted by an object type field."""

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: str
    type: TypeRef
    default_value: str | None = None
    description: str | None = None


class FieldDef(BaseModel):
    """A field of an object or input type.

    Object type fields may take arguments. Input type fields never do, but may
    carry a default value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: str
    type: TypeRef
    args: tuple[ArgDef, ...] = ()
    default_value: str | None = None
    description: str | None = None


class ObjectTypeDef(BaseModel):
    """An output object type, including the query and mutation roots."""

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: str
    fields: tuple[FieldDef, ...] = ()
    description: str | None = None


class InputTypeDef(BaseModel):
    """An input object type."""

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: str
    fields: tuple[FieldDef, ...] = ()
    description: str | None = None


class EnumTypeDef(BaseModel):
    """An enumeration type with its values in declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: str
    values: tuple[str, ...] = ()
    description: str | None = None


class TypeModel(BaseModel):
    """The canonical, language-agnostic model of a GraphQL schema.

    Attributes:
        types: Object types by GraphQL name, root types included.
        inputs: Input object types by GraphQL name.
        enums: Enumerations by GraphQL name.
        scalars: Custom (non built-in) scalars mapped to their target type.
        query: The query root type.
        mutation: The mutation root type. A schema without a mutation root
            yields an empty-fields type rather than ``None``.

    The four maps are read-only views over private copies, so a built model
    cannot be changed through them.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    types: Mapping[str, ObjectTypeDef] = _Field(default_factory=dict)
    inputs: Mapping[str, InputTypeDef] = _Field(default_factory=dict)
    enums: Mapping[str, EnumTypeDef] = _Field(default_factory=dict)
    scalars: Mapping[str, str] = _Field(default_factory=dict)
    query: ObjectTypeDef
    mutation: ObjectTypeDef

    @field_validator("types", "inputs", "enums", "scalars", mode="after")
    @classmethod
    def freeze_mapping(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))
