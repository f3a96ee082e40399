"""Transformer module generator.

Renders a Jinja2 template with the transformers of every operation found
in a set of GraphQL documents.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(ir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import os
from pathlib import Path
from typing import Any

from graphql import DocumentNode, GraphQLError, OperationDefinitionNode, parse
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import TransformerConfig
from .hooks import AddHeaderHook, FilterOperationsHook, HookRunner
from .ir import IRSchema
from .parser import SCHEMA_EXTENSIONS, SchemaParseError
from .visitor import OperationVisitor

TEMPLATE_NAME = "transformers.ts.j2"


def load_documents(documents_path: str) -> list[DocumentNode]:
    """Parse every GraphQL document under a file or directory path."""
    if os.path.isfile(documents_path):
        files = [documents_path]
    else:
        files = []
        for root, _, filenames in os.walk(documents_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        files.sort()

    documents = []
    for file_path in files:
        with open(file_path) as f:
            try:
                documents.append(parse(f.read()))
            except GraphQLError as e:
                raise SchemaParseError(os.path.basename(file_path), e) from e
    return documents


class CodeGenerator:
    """Generates a TypeScript transformer module from documents.

    Available templates to override:
        - transformers.ts.j2 — the generated module; receives ``operations``
          (one text block per operation) and ``skipped``
    """

    def __init__(
        self,
        ir: IRSchema,
        config: TransformerConfig | None = None,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the code generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            config: Naming and JSON-scalar options
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Pre/post generation hooks
        """
        self.ir = ir
        self.config = config or TransformerConfig()
        self.hooks = HookRunner()
        if hooks is not None:
            self.hooks.pre_hooks.extend(hooks.pre_hooks)
            self.hooks.post_hooks.extend(hooks.post_hooks)
        if self.config.exclude_operation_prefix:
            self.hooks.add_pre_hook(FilterOperationsHook(exclude_prefix=self.config.exclude_operation_prefix))
        if self.config.add_header:
            self.hooks.add_post_hook(AddHeaderHook(self.config.add_header))
        self.visitor = OperationVisitor(ir, self.config)

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def skipped(self) -> list[str]:
        return self.visitor.skipped

    def collect_operations(self, documents: list[DocumentNode]) -> list[OperationDefinitionNode]:
        operations = [
            definition
            for document in documents
            for definition in document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ]
        return self.hooks.run_pre_hooks(operations)

    def generate(self, documents: list[DocumentNode], filename: str = "transformers.ts") -> str:
        """Render the module for ``documents``."""
        self.visitor.skipped.clear()
        fragments = []
        for operation in self.collect_operations(documents):
            text = self.visitor.build_operation(operation)
            if text:
                fragments.append(text)

        context: dict[str, Any] = {"operations": fragments, "skipped": self.skipped}
        content = self.env.get_template(TEMPLATE_NAME).render(context)
        return self.hooks.run_post_hooks(filename, content)

    def write(self, documents: list[DocumentNode], output_path: str) -> str:
        """Render the module and write it to ``output_path``."""
        content = self.generate(documents, os.path.basename(output_path))
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(content)
        return content
