# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""One-call compiler entry points for both schema encodings.

Each entry point decodes its input into raw declarations, builds the type
model and returns it together with the constructs that were skipped. No
state is shared between calls, so schemas may be compiled concurrently.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gqlgen.compiler.builder import TypeModelBuilder
from gqlgen.compiler.declarations import RawSchema, SkippedConstruct, UnsupportedPolicy
from gqlgen.compiler.introspection import decode_introspection
from gqlgen.compiler.mapper import DEFAULT_SCALAR_FALLBACK, ScalarMapper
from gqlgen.compiler.parser import parse
from gqlgen.model.entities import TypeModel

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CompileResult:
    """The outcome of one successful compilation.

    Attributes:
        model: The compiled type model.
        mapper: The scalar mapper used, for render consumers that need
            :meth:`ScalarMapper.graphql_type_for`.
        skipped: Constructs that were recognized but not processed, and
            fields dropped because they referenced them.
    """

    model: TypeModel
    mapper: ScalarMapper
    skipped: tuple[SkippedConstruct, ...] = field(default=())


def compile_sdl(
    source: str,
    *,
    overrides: Mapping[str, str] | None = None,
    fallback: str = DEFAULT_SCALAR_FALLBACK,
    policy: UnsupportedPolicy = UnsupportedPolicy.SKIP,
) -> CompileResult:
    """Compile SDL text into a type model.

    Args:
        source: The SDL text.
        overrides: GraphQL scalar name -> target type name overrides.
        fallback: Target type for custom scalars without a mapping.
        policy: How to treat interfaces, unions and non-core directives.

    Raises:
        CompileError: Any subclass, see :mod:`gqlgen.compiler.errors`.
    """
    return _compile(parse(source, policy=policy), overrides, fallback)


def compile_introspection(
    data: str | bytes | Mapping[str, Any],
    *,
    overrides: Mapping[str, str] | None = None,
    fallback: str = DEFAULT_SCALAR_FALLBACK,
    policy: UnsupportedPolicy = UnsupportedPolicy.SKIP,
) -> CompileResult:
    """Compile an introspection result into a type model.

    Arguments are as for :func:`compile_sdl`, with *data* being the
    introspection JSON (text, bytes or decoded mapping).
    """
    return _compile(decode_introspection(data, policy=policy), overrides, fallback)


def compile_schema(
    text: str,
    *,
    is_introspection: bool,
    overrides: Mapping[str, str] | None = None,
    fallback: str = DEFAULT_SCALAR_FALLBACK,
    policy: UnsupportedPolicy = UnsupportedPolicy.SKIP,
) -> CompileResult:
    """Compile schema text in whichever encoding the loader detected."""
    if is_introspection:
        return compile_introspection(text, overrides=overrides, fallback=fallback, policy=policy)
    return compile_sdl(text, overrides=overrides, fallback=fallback, policy=policy)


# ################
# Implementation
# ################


def _compile(schema: RawSchema, overrides: Mapping[str, str] | None, fallback: str) -> CompileResult:
    mapper = ScalarMapper(overrides=overrides or {}, fallback=fallback)
    builder = TypeModelBuilder(schema, mapper)
    model = builder.build()
    return CompileResult(
        model=model,
        mapper=mapper,
        skipped=schema.skipped + tuple(builder.dropped),
    )
