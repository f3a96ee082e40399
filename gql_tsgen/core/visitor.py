"""Per-operation transformer generation.

Walks the operation definitions of parsed documents, derives the names the
react-query bindings use for each operation, and emits its input and output
transformers.
"""

from graphql import DocumentNode, NonNullTypeNode, OperationDefinitionNode, OperationType

from .config import TransformerConfig
from .ir import IRSchema
from .naming import lower_case_first, to_pascal_case
from .scalars import ScalarRegistry
from .transformer import generate_input_transformer, generate_output_transformer
from .type_resolver import TypeResolver

SUPPORTED_OPERATIONS = {
    OperationType.QUERY: "Query",
    OperationType.MUTATION: "Mutation",
}


class OperationVisitor:
    """Generates transformer text for each query and mutation.

    Subscriptions are not supported and anonymous operations cannot be
    named; both produce no text and are listed in ``skipped``.
    """

    def __init__(
        self,
        schema: IRSchema,
        config: TransformerConfig | None = None,
        scalars: ScalarRegistry | None = None,
    ):
        self.config = config or TransformerConfig()
        self.scalars = scalars or self.config.scalar_registry()
        self.resolver = TypeResolver(schema, self.scalars, self.config.max_depth)
        self.skipped: list[str] = []
        prefix = self.config.import_operation_types_from
        self._external_import_prefix = f"{prefix}." if prefix else ""

    def _get_operation_suffix(self, name: str, operation_type: str) -> str:
        if self.config.omit_operation_suffix:
            return ""
        if not self.config.dedupe_operation_suffix:
            return to_pascal_case(operation_type)
        if "Query" in name or "Mutation" in name or "Subscription" in name:
            return ""
        return to_pascal_case(operation_type)

    def convert_name(self, name: str, suffix: str = "") -> str:
        return f"{to_pascal_case(name)}{suffix}"

    @staticmethod
    def has_required_variables(node: OperationDefinitionNode) -> bool:
        """Whether any variable is non-null and has no default value."""
        return any(
            isinstance(v.type, NonNullTypeNode) and v.default_value is None
            for v in node.variable_definitions or ()
        )

    def build_operation(self, node: OperationDefinitionNode) -> str:
        """Return the input and output transformers for one operation."""
        operation_type = SUPPORTED_OPERATIONS.get(node.operation)
        node_name = node.name.value if node.name else ""
        if operation_type is None:
            self.skipped.append(f"{node_name or '<anonymous>'} ({node.operation.value} not supported)")
            return ""
        if not node_name:
            self.skipped.append(f"<anonymous> ({node.operation.value} has no name)")
            return ""

        suffix = self._get_operation_suffix(node_name, operation_type)
        operation_name = self.convert_name(node_name, suffix)
        operation_result_type = self._external_import_prefix + operation_name
        operation_variables_types = self._external_import_prefix + self.convert_name(node_name, f"{suffix}Variables")

        field_name = lower_case_first(node_name)
        root = self.resolver.get_field(field_name)
        output_type = self.resolver.get_output_type(root, field_name)
        variables_type = self.resolver.get_input_variables_type(root)

        input_transformer = generate_input_transformer(
            operation_name,
            operation_variables_types,
            self.has_required_variables(node),
            variables_type,
            self.scalars,
        )
        output_transformer = generate_output_transformer(
            operation_name,
            output_type.field_name,
            output_type.type_name,
            output_type.shape,
            operation_result_type,
            is_list=output_type.is_list,
            scalars=self.scalars,
        )
        return f"{input_transformer}\n\n{output_transformer}"

    def visit_document(self, document: DocumentNode) -> list[str]:
        """Build every operation of a document, dropping empty results."""
        fragments = []
        for definition in document.definitions:
            if isinstance(definition, OperationDefinitionNode):
                text = self.build_operation(definition)
                if text:
                    fragments.append(text)
        return fragments
