"""JSON-text scalar handlers for transformer generation.

Some APIs (AppSync's ``AWSJSON`` being the common case) transmit structured
values as JSON-encoded strings. A handler knows how to emit the TypeScript
expressions that decode such a value coming off the wire and encode it again
before it is sent.

Example usage:
    from gql_tsgen.core.scalars import JSONTextHandler, ScalarRegistry

    registry = ScalarRegistry()
    registry.register("JSONString", JSONTextHandler())

    # Custom handler
    class SuperJSONHandler:
        def decode(self, path):
            return f"superjson.parse({path})"

        def encode(self, path):
            return f"superjson.stringify({path})"

    registry.register("SuperJSON", SuperJSONHandler())
"""

from typing import Protocol, runtime_checkable

DEFAULT_JSON_SCALAR = "AWSJSON"


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for JSON-text scalar handlers.

    Both methods receive the TypeScript access path of the value and
    return an expression; null propagation is added by the caller.
    """

    def decode(self, path: str) -> str:
        """Expression turning wire text at ``path`` into a structured value."""
        ...

    def encode(self, path: str) -> str:
        """Expression turning the structured value at ``path`` into wire text."""
        ...


class JSONTextHandler:
    """Handler for scalars carrying JSON-encoded text."""

    def decode(self, path: str) -> str:
        return f"JSON.parse({path} as unknown as string)"

    def encode(self, path: str) -> str:
        return f"JSON.stringify({path} as unknown as Record<string, any>)"


class ScalarRegistry:
    """Registry of the scalar names whose values are JSON text.

    Example:
        registry = ScalarRegistry()
        registry.has("AWSJSON")   # True
        registry.get("String")    # None
    """

    def __init__(self, defaults: bool = True):
        self._handlers: dict[str, ScalarHandler] = {}
        if defaults:
            self._register_defaults()

    def _register_defaults(self):
        """Register built-in default handlers."""
        self.register(DEFAULT_JSON_SCALAR, JSONTextHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar type, or None if not registered."""
        return self._handlers.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    @property
    def names(self) -> list[str]:
        return sorted(self._handlers)


DEFAULT_REGISTRY = ScalarRegistry()
