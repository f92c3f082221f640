# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline: SDL parsing, introspection decoding, model building."""

from gqlgen.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from gqlgen.compiler.build import CompileResult, compile_introspection, compile_schema, compile_sdl
from gqlgen.compiler.builder import TypeModelBuilder, build_type_model
from gqlgen.compiler.declarations import (
    DeclarationKind,
    RawArgument,
    RawDeclaration,
    RawField,
    RawSchema,
    SkippedConstruct,
    UnsupportedPolicy,
)
from gqlgen.compiler.errors import (
    CollisionError,
    CompileError,
    FormatError,
    SchemaSyntaxError,
    UnresolvedReferenceError,
    UnsupportedConstructError,
)
from gqlgen.compiler.introspection import decode_introspection
from gqlgen.compiler.mapper import (
    BUILTIN_SCALARS,
    DEFAULT_SCALAR_FALLBACK,
    DEFAULT_SCALAR_MAPPINGS,
    IdentifierStyle,
    ScalarMapper,
    parse_mapping_argument,
    to_identifier,
)
from gqlgen.compiler.parser import parse

__all__ = [
    # Entry points
    "compile_sdl",
    "compile_introspection",
    "compile_schema",
    "CompileResult",
    # Stages
    "parse",
    "decode_introspection",
    "build_type_model",
    "TypeModelBuilder",
    # Raw declarations
    "DeclarationKind",
    "RawArgument",
    "RawDeclaration",
    "RawField",
    "RawSchema",
    "SkippedConstruct",
    "UnsupportedPolicy",
    # Mapping
    "BUILTIN_SCALARS",
    "DEFAULT_SCALAR_FALLBACK",
    "DEFAULT_SCALAR_MAPPINGS",
    "IdentifierStyle",
    "ScalarMapper",
    "parse_mapping_argument",
    "to_identifier",
    # Artifacts
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    # Errors
    "CompileError",
    "SchemaSyntaxError",
    "FormatError",
    "UnresolvedReferenceError",
    "CollisionError",
    "UnsupportedConstructError",
]
