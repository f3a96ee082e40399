"""Fetch a schema from a live GraphQL endpoint.

Runs the standard introspection query over HTTP and converts the result
to SDL, so a remote schema goes through the same parser as a local file.
"""

from typing import Any

import httpx
from graphql import build_client_schema, get_introspection_query, print_schema


class SchemaFetchError(Exception):
    """Exception raised when the endpoint answers with GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


def parse_header(raw: str) -> tuple[str, str]:
    """Split a ``"Name: value"`` header string."""
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"Invalid header {raw!r}, expected 'Name: value'")
    return name.strip(), value.strip()


def fetch_schema_sdl(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Introspect the endpoint at ``url`` and return its schema as SDL.

    Args:
        url: GraphQL endpoint URL
        headers: Extra request headers (e.g. authorization)
        timeout: Request timeout in seconds
        transport: Optional httpx transport, mainly for tests

    Raises:
        SchemaFetchError: If the response contains errors
        httpx.HTTPStatusError: If the endpoint returns an error status
    """
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})

    with httpx.Client(timeout=timeout, headers=request_headers, transport=transport) as client:
        response = client.post(url, json={"query": get_introspection_query(descriptions=True)})
        response.raise_for_status()
        result = response.json()

    if result.get("errors"):
        error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
        raise SchemaFetchError(f"Introspection failed: {error_messages}", result["errors"])
    if not result.get("data"):
        raise SchemaFetchError("Introspection returned no data", [])

    return print_schema(build_client_schema(result["data"]))
