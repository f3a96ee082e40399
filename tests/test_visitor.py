"""Tests for per-operation transformer generation."""

from graphql import parse

from gql_tsgen.core.config import TransformerConfig
from gql_tsgen.core.visitor import OperationVisitor


class TestBuildOperation:
    """Tests for OperationVisitor.build_operation."""

    def test_query(self, schema_ir, operations):
        code = OperationVisitor(schema_ir).build_operation(operations["GetNode"])

        assert (
            "export const GetNodeQueryInput = (variables: GetNodeQueryVariables)"
            " => variables as GetNodeQueryVariables;"
        ) in code
        assert "export const GetNodeQueryOutput = ({ getNode }: GetNodeQuery) => getNode && ({\n" in code
        assert "  payload: getNode.payload == null ? getNode.payload" in code
        assert "  tags: getNode.tags?.map((tag) => tag == null ? tag : ({\n" in code
        assert code.index("GetNodeQueryInput") < code.index("GetNodeQueryOutput")

    def test_mutation(self, schema_ir, operations):
        code = OperationVisitor(schema_ir).build_operation(operations["CreateNode"])

        assert (
            "export const CreateNodeMutationInput = (variables: CreateNodeMutationVariables)"
            " => variables && ({\n"
        ) in code
        assert "    ...variables.input,\n" in code
        assert "export const CreateNodeMutationOutput = ({ createNode }: CreateNodeMutation) => createNode && ({" in code

    def test_optional_variables(self, schema_ir, operations):
        code = OperationVisitor(schema_ir).build_operation(operations["ListNodes"])

        assert "(variables?: ListNodesQueryVariables) => variables as ListNodesQueryVariables;" in code
        assert "listNodes?.map((listNode) => listNode && ({" in code
        assert "})) as Array<Node>;" in code

    def test_subscription_skipped(self, schema_ir, operations):
        visitor = OperationVisitor(schema_ir)

        assert visitor.build_operation(operations["OnNode"]) == ""
        assert visitor.skipped == ["OnNode (subscription not supported)"]

    def test_anonymous_skipped(self, schema_ir, operations):
        visitor = OperationVisitor(schema_ir)

        assert visitor.build_operation(operations[None]) == ""
        assert visitor.skipped == ["<anonymous> (query has no name)"]

    def test_unknown_root_field(self, schema_ir):
        node = parse("query Missing { missing }").definitions[0]
        code = OperationVisitor(schema_ir).build_operation(node)

        assert "export const MissingQueryInput = () => undefined;" in code
        assert "export const MissingQueryOutput = ({ missing }: MissingQuery) => missing as unknown;" in code


class TestNaming:
    """Tests for operation and type naming."""

    def test_omit_operation_suffix(self, schema_ir, operations):
        config = TransformerConfig(omit_operation_suffix=True)
        code = OperationVisitor(schema_ir, config).build_operation(operations["GetNode"])

        assert "export const GetNodeInput = (variables: GetNodeVariables)" in code
        assert "({ getNode }: GetNode)" in code

    def test_dedupe_operation_suffix(self, schema_ir):
        visitor = OperationVisitor(schema_ir, TransformerConfig(dedupe_operation_suffix=True))

        assert visitor._get_operation_suffix("GetNodeQuery", "Query") == ""
        assert visitor._get_operation_suffix("NodeMutation", "Mutation") == ""
        assert visitor._get_operation_suffix("GetNode", "Query") == "Query"

    def test_suffix_kept_without_dedupe(self, schema_ir):
        visitor = OperationVisitor(schema_ir)
        assert visitor._get_operation_suffix("GetNodeQuery", "Query") == "Query"

    def test_import_operation_types_from(self, schema_ir, operations):
        config = TransformerConfig(import_operation_types_from="Types")
        code = OperationVisitor(schema_ir, config).build_operation(operations["GetNode"])

        assert "export const GetNodeQueryInput = (variables: Types.GetNodeQueryVariables)" in code
        assert "export const GetNodeQueryOutput = ({ getNode }: Types.GetNodeQuery)" in code

    def test_custom_json_scalars(self, schema_ir, operations):
        config = TransformerConfig(json_scalars=["JSONString"])
        code = OperationVisitor(schema_ir, config).build_operation(operations["GetNode"])

        assert "=> getNode as Node;" in code


class TestRequiredVariables:
    """Tests for OperationVisitor.has_required_variables."""

    def _operation(self, source):
        return parse(source).definitions[0]

    def test_non_null_without_default(self):
        assert OperationVisitor.has_required_variables(self._operation("query Q($id: ID!) { a }")) is True

    def test_nullable(self):
        assert OperationVisitor.has_required_variables(self._operation("query Q($id: ID) { a }")) is False

    def test_non_null_with_default(self):
        assert OperationVisitor.has_required_variables(self._operation('query Q($id: ID! = "1") { a }')) is False

    def test_no_variables(self):
        assert OperationVisitor.has_required_variables(self._operation("query Q { a }")) is False


class TestVisitDocument:
    def test_collects_supported_operations(self, schema_ir, document):
        visitor = OperationVisitor(schema_ir)
        fragments = visitor.visit_document(document)

        assert len(fragments) == 3
        assert len(visitor.skipped) == 2
