# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading schema text from a file or a live GraphQL endpoint.

An ``http``/``https`` URL is introspected with the standard introspection
query; anything else is read as a file, and a ``.json`` extension marks the
file as a saved introspection result rather than SDL.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

# ###############
# Public Interface
# ###############

DEFAULT_TIMEOUT = 30.0

INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types { ...FullType }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args { ...InputValue }
    type { ...TypeRef }
  }
  inputFields { ...InputValue }
  interfaces { ...TypeRef }
  enumValues(includeDeprecated: true) { name description }
  possibleTypes { ...TypeRef }
}

fragment InputValue on __InputValue {
  name
  description
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""


class SourceLoadError(Exception):
    """Raised when a schema file cannot be read or an endpoint cannot be introspected."""


@dataclass(frozen=True)
class SchemaSource:
    """Schema text together with how it should be decoded.

    Attributes:
        text: The SDL or introspection JSON text.
        is_introspection: True if *text* is introspection JSON.
        origin: The file path or URL it was loaded from.
    """

    text: str
    is_introspection: bool
    origin: str


def is_endpoint(source: str) -> bool:
    """Return True if *source* is an absolute http(s) URL."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_source(
    source: str,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> SchemaSource:
    """Load schema text from a file path or a GraphQL endpoint URL.

    Args:
        source: A file path, or an http(s) URL of a GraphQL endpoint.
        headers: Extra HTTP headers for the introspection request.
        timeout: Seconds to wait for the endpoint.

    Raises:
        SourceLoadError: If the file cannot be read or the request fails.
    """
    if is_endpoint(source):
        return SchemaSource(
            text=fetch_introspection(source, headers, timeout=timeout),
            is_introspection=True,
            origin=source,
        )

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SourceLoadError(f"Schema file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(f"Cannot read schema file {path}: {exc}") from exc
    return SchemaSource(text=text, is_introspection=path.suffix.lower() == ".json", origin=str(path))


def fetch_introspection(
    url: str,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """POST the introspection query to *url* and return the raw response body.

    The body is returned undecoded; the introspection decoder reports any
    problem with its content.

    Raises:
        SourceLoadError: On connection failure or a non-2xx status code.
    """
    payload = {"query": INTROSPECTION_QUERY, "operationName": "IntrospectionQuery"}
    try:
        resp = requests.post(url, json=payload, headers=dict(headers or {}), timeout=timeout)
    except requests.RequestException as exc:
        raise SourceLoadError(f"Introspection request to {url} failed: {exc}") from exc

    if not resp.ok:
        raise SourceLoadError(f"Introspection failed with status {resp.status_code} from {url}")
    return resp.text
