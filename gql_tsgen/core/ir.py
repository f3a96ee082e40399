"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses for the parts of a schema the type
resolver walks to build field shape trees.
"""

from dataclasses import dataclass, field


@dataclass
class IRArgument:
    """Represents an argument to a root field (an operation variable)."""
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True
    description: str | None = None


@dataclass
class IRField:
    """Represents a field in a GraphQL type, input or interface."""
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True  # True if nullable (no ! in GraphQL)
    description: str | None = None
    arguments: list[IRArgument] = field(default_factory=list)


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue]
    description: str | None = None


@dataclass
class IRType:
    """Represents a GraphQL object type or input type."""
    name: str
    fields: list[IRField]
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    is_input: bool = False


@dataclass
class IRInterface:
    """Represents a GraphQL interface type."""
    name: str
    fields: list[IRField]
    description: str | None = None


@dataclass
class IRScalar:
    """Represents a GraphQL scalar type."""
    name: str
    description: str | None = None


@dataclass
class IROperation:
    """Represents a root Query or Mutation field."""
    name: str
    operation_type: str  # 'query' or 'mutation'
    arguments: list[IRArgument]
    return_type: str
    is_return_list: bool = False
    is_return_optional: bool = True
    description: str | None = None


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    scalars: dict[str, IRScalar] = field(default_factory=dict)
    enums: dict[str, IREnum] = field(default_factory=dict)
    types: dict[str, IRType] = field(default_factory=dict)
    inputs: dict[str, IRType] = field(default_factory=dict)
    interfaces: dict[str, IRInterface] = field(default_factory=dict)
    queries: list[IROperation] = field(default_factory=list)
    mutations: list[IROperation] = field(default_factory=list)

    def get_type_by_name(self, name: str) -> IRType | IRInterface | None:
        """Look up an object type, input type or interface by name."""
        if name in self.types:
            return self.types[name]
        if name in self.inputs:
            return self.inputs[name]
        if name in self.interfaces:
            return self.interfaces[name]
        return None

    @property
    def all_operations(self) -> list[IROperation]:
        """Return all queries and mutations."""
        return self.queries + self.mutations

    @property
    def root_fields(self) -> dict[str, IROperation]:
        """Root fields by name; a mutation shadows a query of the same name."""
        return {op.name: op for op in self.all_operations}
