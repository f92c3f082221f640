# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoder for GraphQL introspection query results.

Turns the JSON a live endpoint returns for the standard introspection query
into the same :class:`RawSchema` the SDL parser produces. Each
``{kind, name, ofType}`` chain is rebuilt into list/non-null wrapping with the
same structure the SDL notation would give, so both encodings of one schema
compile to equal type models.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from gqlgen.compiler.declarations import (
    DeclarationKind,
    RawArgument,
    RawDeclaration,
    RawField,
    RawSchema,
    SkippedConstruct,
    UnsupportedPolicy,
    record_unsupported,
)
from gqlgen.compiler.errors import SOURCE_INTROSPECTION, FormatError, SchemaSyntaxError
from gqlgen.compiler.parser import parse_value_literal
from gqlgen.model.types import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef

# ###############
# Public Interface
# ###############


def decode_introspection(
    data: str | bytes | Mapping[str, Any],
    *,
    policy: UnsupportedPolicy = UnsupportedPolicy.SKIP,
) -> RawSchema:
    """Decode an introspection result into raw declarations.

    Accepts the full HTTP response (``{"data": {"__schema": …}}``), the
    ``{"__schema": …}`` object, or the bare schema object with ``queryType``,
    ``mutationType`` and ``types``.

    Args:
        data: JSON text, UTF-8 bytes, or an already decoded mapping.
        policy: How to treat INTERFACE and UNION types.

    Returns:
        A RawSchema with declarations in ``types[]`` order.

    Raises:
        FormatError: If the JSON is invalid, or a required member is absent
            or has the wrong type. The error names the JSON path.
        UnsupportedConstructError: If *policy* is FAIL and the schema
            contains an interface or union.
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise FormatError(f"Invalid JSON: {exc}", "$") from exc
    schema, path = _unwrap(data)
    return _Decoder(policy).decode(schema, path)


# ################
# Implementation
# ################

# Built-in introspection types (__Schema, __Type, …) are never part of the model.
_META_PREFIX = "__"

_KIND_TO_DECLARATION: dict[str, DeclarationKind] = {
    "OBJECT": DeclarationKind.OBJECT,
    "INPUT_OBJECT": DeclarationKind.INPUT,
    "ENUM": DeclarationKind.ENUM,
    "SCALAR": DeclarationKind.SCALAR,
}

_UNSUPPORTED_KINDS: dict[str, str] = {
    "INTERFACE": "interface",
    "UNION": "union",
}


def _unwrap(data: object) -> tuple[Mapping[str, Any], str]:
    """Locate the schema object inside one of the accepted envelopes."""
    if not isinstance(data, Mapping):
        raise FormatError("Introspection result must be a JSON object", "$")
    path = "$"
    if "data" in data or "errors" in data:
        if data.get("data") is None:
            errors = data.get("errors")
            raise FormatError(f"Introspection response has no data (errors: {errors!r})", "$.data")
        data = _require_mapping(data, "data", path)
        path = "$.data"
    if "__schema" in data:
        return _require_mapping(data, "__schema", path), f"{path}.__schema"
    return data, path


def _require(obj: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise FormatError(f"Missing required member '{key}'", f"{path}.{key}")
    return obj[key]


def _require_mapping(obj: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = _require(obj, key, path)
    if not isinstance(value, Mapping):
        raise FormatError(f"'{key}' must be an object", f"{path}.{key}")
    return value


def _require_list(obj: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = _require(obj, key, path)
    if not isinstance(value, list):
        raise FormatError(f"'{key}' must be a list", f"{path}.{key}")
    return value


def _require_str(obj: Mapping[str, Any], key: str, path: str) -> str:
    value = _require(obj, key, path)
    if not isinstance(value, str):
        raise FormatError(f"'{key}' must be a string", f"{path}.{key}")
    return value


def _optional_str(obj: Mapping[str, Any], key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise FormatError(f"'{key}' must be a string or null", f"{path}.{key}")
    return value


def _optional_list(obj: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise FormatError(f"'{key}' must be a list or null", f"{path}.{key}")
    return value


def _as_mapping(value: object, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise FormatError("Expected an object", path)
    return value


class _Decoder:
    """Walks one introspection schema object."""

    def __init__(self, policy: UnsupportedPolicy) -> None:
        self._policy = policy
        self._skipped: list[SkippedConstruct] = []

    def decode(self, schema: Mapping[str, Any], path: str) -> RawSchema:
        query_root = self._root_name(schema, "queryType", path, required=True)
        mutation_root = self._root_name(schema, "mutationType", path, required=False)
        subscription_root = self._root_name(schema, "subscriptionType", path, required=False)
        if subscription_root is not None:
            record_unsupported(
                self._policy,
                self._skipped,
                "subscription",
                subscription_root,
                source_kind=SOURCE_INTROSPECTION,
                location=f"{path}.subscriptionType",
            )

        declarations: list[RawDeclaration] = []
        types_path = f"{path}.types"
        for index, entry in enumerate(_require_list(schema, "types", path)):
            declaration = self._decode_type(_as_mapping(entry, f"{types_path}[{index}]"), f"{types_path}[{index}]")
            if declaration is not None:
                declarations.append(declaration)

        return RawSchema(
            declarations=tuple(declarations),
            query_root=query_root,
            mutation_root=mutation_root,
            skipped=tuple(self._skipped),
            source_kind=SOURCE_INTROSPECTION,
        )

    def _root_name(self, schema: Mapping[str, Any], key: str, path: str, *, required: bool) -> str | None:
        if required:
            root = _require(schema, key, path)
        else:
            root = schema.get(key)
        if root is None:
            if required:
                raise FormatError(f"'{key}' must not be null", f"{path}.{key}")
            return None
        root = _as_mapping(root, f"{path}.{key}")
        return _require_str(root, "name", f"{path}.{key}")

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def _decode_type(self, entry: Mapping[str, Any], path: str) -> RawDeclaration | None:
        kind = _require_str(entry, "kind", path)
        name = _require_str(entry, "name", path)
        if name.startswith(_META_PREFIX):
            return None
        if kind in _UNSUPPORTED_KINDS:
            record_unsupported(
                self._policy,
                self._skipped,
                _UNSUPPORTED_KINDS[kind],
                name,
                source_kind=SOURCE_INTROSPECTION,
                location=path,
            )
            return None
        if kind not in _KIND_TO_DECLARATION:
            raise FormatError(f"Unknown type kind {kind!r} for named type '{name}'", f"{path}.kind", name=name)

        declaration_kind = _KIND_TO_DECLARATION[kind]
        description = _optional_str(entry, "description", path)
        if declaration_kind == DeclarationKind.OBJECT:
            fields = tuple(
                self._decode_field(_as_mapping(f, f"{path}.fields[{i}]"), f"{path}.fields[{i}]")
                for i, f in enumerate(_optional_list(entry, "fields", path))
            )
            return RawDeclaration(
                kind=declaration_kind, name=name, fields=fields, description=description, location=path
            )
        if declaration_kind == DeclarationKind.INPUT:
            fields = tuple(
                self._decode_input_field(_as_mapping(f, f"{path}.inputFields[{i}]"), f"{path}.inputFields[{i}]")
                for i, f in enumerate(_optional_list(entry, "inputFields", path))
            )
            return RawDeclaration(
                kind=declaration_kind, name=name, fields=fields, description=description, location=path
            )
        if declaration_kind == DeclarationKind.ENUM:
            values: list[str] = []
            for i, v in enumerate(_optional_list(entry, "enumValues", path)):
                value_path = f"{path}.enumValues[{i}]"
                value = _require_str(_as_mapping(v, value_path), "name", value_path)
                if value in values:
                    raise FormatError(
                        f"Enum value {value!r} is declared more than once in '{name}'",
                        f"{value_path}.name",
                        name=name,
                    )
                values.append(value)
            return RawDeclaration(
                kind=declaration_kind, name=name, values=tuple(values), description=description, location=path
            )
        return RawDeclaration(kind=declaration_kind, name=name, description=description, location=path)

    def _decode_field(self, entry: Mapping[str, Any], path: str) -> RawField:
        args = tuple(
            self._decode_input_value(_as_mapping(a, f"{path}.args[{i}]"), f"{path}.args[{i}]")
            for i, a in enumerate(_optional_list(entry, "args", path))
        )
        return RawField(
            name=_require_str(entry, "name", path),
            type=_decode_type_ref(_require(entry, "type", path), f"{path}.type"),
            args=args,
            description=_optional_str(entry, "description", path),
        )

    def _decode_input_field(self, entry: Mapping[str, Any], path: str) -> RawField:
        value = self._decode_input_value(entry, path)
        return RawField(
            name=value.name,
            type=value.type,
            default_value=value.default_value,
            description=value.description,
        )

    def _decode_input_value(self, entry: Mapping[str, Any], path: str) -> RawArgument:
        default_value = _optional_str(entry, "defaultValue", path)
        if default_value is not None:
            try:
                default_value = parse_value_literal(default_value)
            except SchemaSyntaxError as exc:
                raise FormatError(
                    f"Invalid default value {default_value!r}: {exc}",
                    f"{path}.defaultValue",
                ) from exc
        return RawArgument(
            name=_require_str(entry, "name", path),
            type=_decode_type_ref(_require(entry, "type", path), f"{path}.type"),
            default_value=default_value,
            description=_optional_str(entry, "description", path),
        )


def _decode_type_ref(value: object, path: str) -> TypeRef:
    """Rebuild a ``{kind, name, ofType}`` chain into a TypeRef.

    Raises:
        FormatError: If the chain is malformed, ends without a name, or
            NON_NULL directly wraps NON_NULL.
    """
    node = _as_mapping(value, path)
    kind = _require_str(node, "kind", path)
    if kind == "NON_NULL":
        inner_path = f"{path}.ofType"
        inner = _decode_type_ref(_require(node, "ofType", path), inner_path)
        if isinstance(inner, NonNullTypeRef):
            raise FormatError("NON_NULL cannot wrap another NON_NULL", inner_path)
        return NonNullTypeRef(of_type=inner)
    if kind == "LIST":
        return ListTypeRef(of_type=_decode_type_ref(_require(node, "ofType", path), f"{path}.ofType"))
    name = node.get("name")
    if not isinstance(name, str):
        raise FormatError(f"Type reference of kind {kind!r} must carry a name", f"{path}.name")
    return NamedTypeRef(name=name)
