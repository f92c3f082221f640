# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for compiled GraphQL schemas (types, inputs, enums, roots)."""

from gqlgen.model.entities import (
    ArgDef,
    EnumTypeDef,
    FieldDef,
    InputTypeDef,
    ObjectTypeDef,
    TypeModel,
)
from gqlgen.model.types import (
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeRef,
    base_type,
    is_list,
    is_non_null,
    render_type_ref,
)

__all__ = [
    # Type references
    "NamedTypeRef",
    "ListTypeRef",
    "NonNullTypeRef",
    "TypeRef",
    "base_type",
    "is_list",
    "is_non_null",
    "render_type_ref",
    # Definitions
    "ArgDef",
    "FieldDef",
    "ObjectTypeDef",
    "InputTypeDef",
    "EnumTypeDef",
    "TypeModel",
]
