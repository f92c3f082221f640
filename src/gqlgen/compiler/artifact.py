# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of compiled TypeModel artifacts.

An artifact is the hand-off format to render consumers that run in a separate
process. It is compact JSON, versioned so future schema changes can be
detected. Definitions are stored as lists in model order; the root types are
stored by name when they are part of ``types`` and inline otherwise (the
synthesized empty mutation root).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from gqlgen.model.entities import ArgDef, EnumTypeDef, FieldDef, InputTypeDef, ObjectTypeDef, TypeModel
from gqlgen.model.types import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".gqlmodel.json"


def serialize(model: TypeModel) -> str:
    """Serialize a TypeModel to a compact JSON string."""
    return json.dumps(_model_to_dict(model), separators=(",", ":"))


def deserialize(data: str) -> TypeModel:
    """Deserialize a TypeModel from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`TypeModel`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _model_from_dict(obj)


def write_artifact(model: TypeModel, path: Path) -> None:
    """Write a compiled artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model), encoding="utf-8")


def read_artifact(path: Path) -> TypeModel:
    """Read and deserialize a compiled artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _model_to_dict(model: TypeModel) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "types": [_object_to_dict(t) for t in model.types.values()],
        "inputs": [_input_to_dict(i) for i in model.inputs.values()],
        "enums": [_enum_to_dict(e) for e in model.enums.values()],
        "scalars": dict(model.scalars),
        "query": _root_to_dict(model.query, model),
        "mutation": _root_to_dict(model.mutation, model),
    }


def _model_from_dict(obj: dict[str, Any]) -> TypeModel:
    types = {t.name: t for t in (_object_from_dict(t) for t in obj.get("types", []))}
    inputs = {i.name: i for i in (_input_from_dict(i) for i in obj.get("inputs", []))}
    enums = {e.name: e for e in (_enum_from_dict(e) for e in obj.get("enums", []))}
    return TypeModel(
        types=types,
        inputs=inputs,
        enums=enums,
        scalars=obj.get("scalars", {}),
        query=_root_from_dict(obj["query"], types),
        mutation=_root_from_dict(obj["mutation"], types),
    )


def _root_to_dict(root: ObjectTypeDef, model: TypeModel) -> dict[str, Any]:
    if model.types.get(root.name) == root:
        return {"ref": root.name}
    return _object_to_dict(root)


def _root_from_dict(obj: dict[str, Any], types: dict[str, ObjectTypeDef]) -> ObjectTypeDef:
    if "ref" in obj:
        name = obj["ref"]
        if name not in types:
            raise ValueError(f"Root type {name!r} is not present in the artifact")
        return types[name]
    return _object_from_dict(obj)


def _with_description(d: dict[str, Any], description: str | None) -> dict[str, Any]:
    if description is not None:
        d["description"] = description
    return d


def _object_to_dict(type_def: ObjectTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": type_def.name,
        "id": type_def.identifier,
        "fields": [_field_to_dict(f) for f in type_def.fields],
    }
    return _with_description(d, type_def.description)


def _object_from_dict(obj: dict[str, Any]) -> ObjectTypeDef:
    return ObjectTypeDef(
        name=obj["name"],
        identifier=obj["id"],
        fields=tuple(_field_from_dict(f) for f in obj.get("fields", [])),
        description=obj.get("description"),
    )


def _input_to_dict(input_def: InputTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": input_def.name,
        "id": input_def.identifier,
        "fields": [_field_to_dict(f) for f in input_def.fields],
    }
    return _with_description(d, input_def.description)


def _input_from_dict(obj: dict[str, Any]) -> InputTypeDef:
    return InputTypeDef(
        name=obj["name"],
        identifier=obj["id"],
        fields=tuple(_field_from_dict(f) for f in obj.get("fields", [])),
        description=obj.get("description"),
    )


def _enum_to_dict(enum_def: EnumTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {"name": enum_def.name, "id": enum_def.identifier, "values": list(enum_def.values)}
    return _with_description(d, enum_def.description)


def _enum_from_dict(obj: dict[str, Any]) -> EnumTypeDef:
    return EnumTypeDef(
        name=obj["name"],
        identifier=obj["id"],
        values=tuple(obj.get("values", [])),
        description=obj.get("description"),
    )


def _field_to_dict(f: FieldDef) -> dict[str, Any]:
    d: dict[str, Any] = {"name": f.name, "id": f.identifier, "type": _type_ref_to_dict(f.type)}
    if f.args:
        d["args"] = [_arg_to_dict(a) for a in f.args]
    if f.default_value is not None:
        d["default"] = f.default_value
    return _with_description(d, f.description)


def _field_from_dict(obj: dict[str, Any]) -> FieldDef:
    return FieldDef(
        name=obj["name"],
        identifier=obj["id"],
        type=_type_ref_from_dict(obj["type"]),
        args=tuple(_arg_from_dict(a) for a in obj.get("args", [])),
        default_value=obj.get("default"),
        description=obj.get("description"),
    )


def _arg_to_dict(arg: ArgDef) -> dict[str, Any]:
    d: dict[str, Any] = {"name": arg.name, "id": arg.identifier, "type": _type_ref_to_dict(arg.type)}
    if arg.default_value is not None:
        d["default"] = arg.default_value
    return _with_description(d, arg.description)


def _arg_from_dict(obj: dict[str, Any]) -> ArgDef:
    return ArgDef(
        name=obj["name"],
        identifier=obj["id"],
        type=_type_ref_from_dict(obj["type"]),
        default_value=obj.get("default"),
        description=obj.get("description"),
    )


def _type_ref_to_dict(type_ref: TypeRef) -> dict[str, Any]:
    """Encode a TypeRef as a tagged dict with compact keys."""
    if isinstance(type_ref, NonNullTypeRef):
        return {"k": "non_null", "o": _type_ref_to_dict(type_ref.of_type)}
    if isinstance(type_ref, ListTypeRef):
        return {"k": "list", "o": _type_ref_to_dict(type_ref.of_type)}
    # NamedTypeRef is the only remaining variant.
    assert isinstance(type_ref, NamedTypeRef)
    d: dict[str, Any] = {"k": "named", "n": type_ref.name}
    if type_ref.target is not None:
        d["t"] = type_ref.target
    return d


def _type_ref_from_dict(obj: dict[str, Any]) -> TypeRef:
    """Decode a TypeRef from a tagged dict."""
    kind = obj["k"]
    if kind == "non_null":
        return NonNullTypeRef(of_type=_type_ref_from_dict(obj["o"]))
    if kind == "list":
        return ListTypeRef(of_type=_type_ref_from_dict(obj["o"]))
    if kind == "named":
        return NamedTypeRef(name=obj["n"], target=obj.get("t"))
    raise ValueError(f"Unknown type ref kind: {kind!r}")
