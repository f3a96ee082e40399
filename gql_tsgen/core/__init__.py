"""Core modules for transformer generation."""

from .config import TransformerConfig
from .generator import CodeGenerator, load_documents
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .introspection import SchemaFetchError, fetch_schema_sdl
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
from .parser import SchemaParseError, SchemaParser
from .scalars import JSONTextHandler, ScalarHandler, ScalarRegistry
from .shapes import (
    ObjectShape,
    ScalarShape,
    Shape,
    ShapeField,
    annotate_name,
    element_variable,
    parse_annotated_name,
)
from .transformer import (
    TransformDirection,
    build_transform,
    generate_input_transformer,
    generate_output_transformer,
    generate_variables_signature,
    has_json_fields,
)
from .type_resolver import OutputType, TypeResolver
from .visitor import OperationVisitor

__all__ = [
    # Config
    "TransformerConfig",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "JSONTextHandler",
    # Shapes
    "ObjectShape",
    "ScalarShape",
    "Shape",
    "ShapeField",
    "annotate_name",
    "element_variable",
    "parse_annotated_name",
    # Transformers
    "TransformDirection",
    "build_transform",
    "generate_input_transformer",
    "generate_output_transformer",
    "generate_variables_signature",
    "has_json_fields",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # IR types
    "IRArgument",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRInterface",
    "IROperation",
    "IRScalar",
    "IRSchema",
    "IRType",
    # Schema loading
    "SchemaParseError",
    "SchemaParser",
    "SchemaFetchError",
    "fetch_schema_sdl",
    # Resolution and generation
    "OutputType",
    "TypeResolver",
    "OperationVisitor",
    "CodeGenerator",
    "load_documents",
]
