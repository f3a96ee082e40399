"""GraphQL schema parser using graphql-core.

Parses SDL (.graphql/.graphqls files or text) and produces an IRSchema.
"""

import os
from typing import Any

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLError,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    parse,
)

from .ir import (
    IRArgument,
    IREnum,
    IREnumValue,
    IRField,
    IRInterface,
    IROperation,
    IRScalar,
    IRSchema,
    IRType,
)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")
ROOT_TYPES = {"Query": "query", "Mutation": "mutation"}


class SchemaParseError(Exception):
    """Raised when a schema source is not valid SDL."""

    def __init__(self, source_name: str, error: GraphQLError):
        self.source_name = source_name
        self.error = error
        super().__init__(f"Error parsing {source_name}: {error.message}")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str | None = None):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        for file_path in self._collect_schema_files():
            with open(file_path) as f:
                self._parse_text(f.read(), os.path.basename(file_path))
        return self.ir

    def parse_source(self, source: str, source_name: str = "<schema>") -> IRSchema:
        """Parse SDL text and return the IR accumulated so far."""
        self._parse_text(source, source_name)
        return self.ir

    def _parse_text(self, source: str, source_name: str):
        try:
            ast = parse(source)
        except GraphQLError as e:
            raise SchemaParseError(source_name, e) from e
        self._process_ast(ast)

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if self.schema_path is None:
            return files
        if os.path.isfile(self.schema_path):
            files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                self._process_scalar(definition)
            elif isinstance(definition, EnumTypeDefinitionNode):
                self._process_enum(definition)
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                self._process_interface(definition)
            elif isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
                self._process_object_type(definition)
            elif isinstance(definition, (InputObjectTypeDefinitionNode, InputObjectTypeExtensionNode)):
                self._process_input_type(definition)

    def _process_scalar(self, node: ScalarTypeDefinitionNode):
        name = node.name.value
        self.ir.scalars[name] = IRScalar(
            name=name,
            description=node.description.value if node.description else None,
        )

    def _process_enum(self, node: EnumTypeDefinitionNode):
        name = node.name.value
        values = [
            IREnumValue(
                name=v.name.value,
                description=v.description.value if v.description else None,
            )
            for v in node.values
        ]
        self.ir.enums[name] = IREnum(
            name=name,
            values=values,
            description=node.description.value if node.description else None,
        )

    def _process_interface(self, node: InterfaceTypeDefinitionNode):
        name = node.name.value
        self.ir.interfaces[name] = IRInterface(
            name=name,
            fields=self._process_fields(node.fields),
            description=node.description.value if node.description else None,
        )

    def _process_object_type(self, node: ObjectTypeDefinitionNode | ObjectTypeExtensionNode):
        """Process object types and extensions.

        Query/Mutation fields become operations; fields of other types are
        merged into an existing definition of the same name.
        """
        name = node.name.value
        if name in ROOT_TYPES:
            self._process_operations(node)
            return
        if name == "Subscription":
            return

        fields = self._process_fields(node.fields)
        description = getattr(node, "description", None)
        existing = self.ir.types.get(name)
        if existing is None:
            self.ir.types[name] = IRType(
                name=name,
                fields=fields,
                interfaces=[i.name.value for i in node.interfaces or ()],
                description=description.value if description else None,
            )
            return

        existing_names = {f.name for f in existing.fields}
        for f in fields:
            if f.name not in existing_names:
                existing.fields.append(f)
                existing_names.add(f.name)
        for interface in node.interfaces or ():
            if interface.name.value not in existing.interfaces:
                existing.interfaces.append(interface.name.value)
        if description:
            existing.description = description.value

    def _process_input_type(self, node: InputObjectTypeDefinitionNode | InputObjectTypeExtensionNode):
        name = node.name.value
        fields = self._process_fields(node.fields)
        existing = self.ir.inputs.get(name)
        if existing is None:
            description = getattr(node, "description", None)
            self.ir.inputs[name] = IRType(
                name=name,
                fields=fields,
                description=description.value if description else None,
                is_input=True,
            )
        else:
            existing_names = {f.name for f in existing.fields}
            existing.fields.extend(f for f in fields if f.name not in existing_names)

    def _process_fields(self, field_nodes) -> list[IRField]:
        """Process field definitions into an IRField list."""
        fields = []
        for node in field_nodes or ():
            type_info = self._get_type_info(node.type)
            fields.append(
                IRField(
                    name=node.name.value,
                    type_name=type_info["name"],
                    is_list=type_info["is_list"],
                    is_optional=type_info["is_optional"],
                    description=node.description.value if node.description else None,
                    arguments=self._process_arguments(getattr(node, "arguments", None)),
                )
            )
        return fields

    def _process_arguments(self, argument_nodes) -> list[IRArgument]:
        args = []
        for arg_node in argument_nodes or ():
            arg_type_info = self._get_type_info(arg_node.type)
            args.append(
                IRArgument(
                    name=arg_node.name.value,
                    type_name=arg_type_info["name"],
                    is_list=arg_type_info["is_list"],
                    is_optional=arg_type_info["is_optional"],
                    description=arg_node.description.value if arg_node.description else None,
                )
            )
        return args

    def _process_operations(self, node: ObjectTypeDefinitionNode | ObjectTypeExtensionNode):
        """Process Query or Mutation type into operations."""
        op_type = ROOT_TYPES[node.name.value]
        target = self.ir.queries if op_type == "query" else self.ir.mutations
        for field in node.fields or ():
            type_info = self._get_type_info(field.type)
            target.append(
                IROperation(
                    name=field.name.value,
                    operation_type=op_type,
                    arguments=self._process_arguments(field.arguments),
                    return_type=type_info["name"],
                    is_return_list=type_info["is_list"],
                    is_return_optional=type_info["is_optional"],
                    description=field.description.value if field.description else None,
                )
            )

    @staticmethod
    def _get_type_info(type_node: TypeNode) -> dict[str, Any]:
        """Extract the type name, is_list, and is_optional from the type node."""
        is_optional = True
        is_list = False

        # NonNull wrapper means not optional
        if isinstance(type_node, NonNullTypeNode):
            is_optional = False
            type_node = type_node.type

        # List wrapper, possibly nested ([[Type!]!])
        while isinstance(type_node, ListTypeNode):
            is_list = True
            type_node = type_node.type
            if isinstance(type_node, NonNullTypeNode):
                type_node = type_node.type

        assert isinstance(type_node, NamedTypeNode), f"Expected NamedTypeNode, got {type(type_node)}"

        return {
            "name": type_node.name.value,
            "is_list": is_list,
            "is_optional": is_optional,
        }
