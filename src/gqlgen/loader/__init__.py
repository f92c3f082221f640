# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema source loading from files and GraphQL endpoints."""

from gqlgen.loader.source import (
    INTROSPECTION_QUERY,
    SchemaSource,
    SourceLoadError,
    fetch_introspection,
    is_endpoint,
    load_source,
)

__all__ = [
    "INTROSPECTION_QUERY",
    "SchemaSource",
    "SourceLoadError",
    "fetch_introspection",
    "is_endpoint",
    "load_source",
]
