"""Generator configuration.

Options can be given in snake_case or in the camelCase used by
graphql-codegen config files:

    {
        "jsonScalars": ["AWSJSON"],
        "dedupeOperationSuffix": true,
        "importOperationTypesFrom": "Operations"
    }
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .scalars import DEFAULT_JSON_SCALAR, JSONTextHandler, ScalarRegistry
from .type_resolver import DEFAULT_MAX_DEPTH


class TransformerConfig(BaseModel):
    """Options controlling naming and JSON-text scalar detection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    json_scalars: list[str] = Field(default_factory=lambda: [DEFAULT_JSON_SCALAR])
    omit_operation_suffix: bool = False
    dedupe_operation_suffix: bool = False
    import_operation_types_from: str = ""
    add_header: str | None = None
    exclude_operation_prefix: str | None = None
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)

    @classmethod
    def from_file(cls, path: str | Path) -> "TransformerConfig":
        """Load configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())

    def scalar_registry(self) -> ScalarRegistry:
        """Registry containing exactly the configured JSON-text scalars."""
        registry = ScalarRegistry(defaults=False)
        for name in self.json_scalars:
            registry.register(name, JSONTextHandler())
        return registry
