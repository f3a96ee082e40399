"""Input/output transformer generation.

Emits TypeScript functions that convert JSON-text fields of an operation
between their wire form (a JSON string) and a structured value:

    export const GetNodeQueryOutput = ({ getNode }: GetNodeQuery) => getNode && ({
      ...getNode,
      payload: getNode.payload == null ? getNode.payload : JSON.parse(getNode.payload as unknown as string),
    }) as Node;

Only fields whose shape contains a JSON-text scalar are overridden; all other
fields are carried over by the spread of the original value. Every access in
the generated code tolerates null/undefined intermediates.
"""

from collections.abc import Sequence
from enum import Enum

from .scalars import DEFAULT_REGISTRY, ScalarRegistry
from .shapes import ObjectShape, ScalarShape, Shape, ShapeField, element_variable

INDENT = "  "
VARIABLES_PARAMETER = "variables"


class TransformDirection(Enum):
    """Wire text -> structured value, or structured value -> wire text."""
    DECODE = "decode"
    ENCODE = "encode"


def _indent(fragment: str) -> str:
    return "\n".join(f"{INDENT}{line}" if line else line for line in fragment.split("\n"))


def has_json_fields(shape: Shape | None, scalars: ScalarRegistry | None = None) -> bool:
    """Check whether a shape tree has a JSON-text scalar leaf at any depth."""
    if shape is None:
        return False
    if scalars is None:
        scalars = DEFAULT_REGISTRY
    if isinstance(shape, ScalarShape):
        return scalars.has(shape.marker)
    return any(has_json_fields(f.shape, scalars) for f in shape.fields)


def _scalar_expression(
    f: ShapeField,
    path: str,
    direction: TransformDirection,
    scalars: ScalarRegistry,
) -> str | None:
    """Null-propagating conversion of a JSON-text scalar (or list of them) at ``path``."""
    handler = scalars.get(f.shape.marker)
    if handler is None:
        return None
    convert = handler.decode if direction is TransformDirection.DECODE else handler.encode
    if f.is_array:
        element = f.element_name
        return f"{path}?.map(({element}) => {element} == null ? {element} : {convert(element)})"
    return f"{path} == null ? {path} : {convert(path)}"


def build_transform(
    fields: Sequence[ShapeField],
    base_path: str,
    direction: TransformDirection,
    scalars: ScalarRegistry | None = None,
) -> list[str]:
    """Build the override entries for the JSON-text fields below ``base_path``.

    Args:
        fields: Fields of the object being rebuilt, in output order
        base_path: TypeScript access path of that object
        direction: Whether values are decoded or encoded
        scalars: JSON-text scalar registry (defaults to ``AWSJSON`` only)

    Returns:
        One fragment per overridden field. Nested objects and lists are
        inlined as a single multi-line fragment. The fragments are meant to
        follow a spread of the original object.
    """
    if scalars is None:
        scalars = DEFAULT_REGISTRY

    fragments = []
    for f in fields:
        path = f"{base_path}.{f.name}"

        if isinstance(f.shape, ScalarShape):
            expression = _scalar_expression(f, path, direction, scalars)
            if expression is not None:
                fragments.append(f"{f.name}: {expression},")
            continue

        # Objects without JSON fields pass through untouched
        if not has_json_fields(f.shape, scalars):
            continue

        if f.is_array:
            element = f.element_name
            nested = build_transform(f.shape.fields, f"{element}?", direction, scalars)
            lines = [
                f"{f.name}: {path}?.map(({element}) => {element} == null ? {element} : ({{",
                f"{INDENT}...{element},",
                *(_indent(n) for n in nested),
                "})),",
            ]
        else:
            nested = build_transform(f.shape.fields, f"{path}?", direction, scalars)
            lines = [
                f"{f.name}: {path} == null ? {path} : {{",
                f"{INDENT}...{path},",
                *(_indent(n) for n in nested),
                "},",
            ]
        fragments.append("\n".join(lines))

    return fragments


def generate_variables_signature(has_required_variables: bool, variables_type: str) -> str:
    """Parameter declaration for an operation's variables."""
    return f"{VARIABLES_PARAMETER}{'' if has_required_variables else '?'}: {variables_type}"


def generate_output_transformer(
    operation_name: str,
    field_name: str,
    type_name: str,
    output_shape: Shape | None,
    operation_result_type: str,
    is_list: bool = False,
    scalars: ScalarRegistry | None = None,
) -> str:
    """Generate ``<operation>Output``, which extracts and decodes the root field.

    Args:
        operation_name: Converted operation name, e.g. ``GetNodeQuery``
        field_name: Root field selected by the operation, e.g. ``getNode``
        type_name: TypeScript type of the root field's value
        output_shape: Shape of the root field's type
        operation_result_type: TypeScript type of the raw result
        is_list: Whether the root field is a list
        scalars: JSON-text scalar registry

    Returns:
        A doc comment followed by the exported arrow function.
    """
    comment = "\n".join([
        "/**",
        f" * Output transformer function for `{operation_name}`.",
        f" * It extracts the `{field_name}` field from the result and transforms it into a `{type_name}` object.",
        " * If the object contains JSON fields, it will automatically JSON parse these fields and return a new object.",
        " * If the object does not contain any JSON fields, it will return the original object.",
        f" * @param data {operation_result_type} - The data returned from the GraphQL server",
        f" * @returns {type_name} - The transformed data",
        " */",
    ])
    head = f"export const {operation_name}Output = ({{ {field_name} }}: {operation_result_type}) =>"

    if not has_json_fields(output_shape, scalars):
        implementation = f"{head} {field_name} as {type_name};"
    elif isinstance(output_shape, ScalarShape):
        root = ShapeField(name=field_name, shape=output_shape, is_array=is_list)
        expression = _scalar_expression(root, field_name, TransformDirection.DECODE, scalars or DEFAULT_REGISTRY)
        implementation = f"{head} ({expression}) as {type_name};"
    elif is_list:
        element = element_variable(field_name)
        overrides = build_transform(output_shape.fields, element, TransformDirection.DECODE, scalars)
        implementation = "\n".join([
            f"{head} {field_name}?.map(({element}) => {element} && ({{",
            f"{INDENT}...{element},",
            *(_indent(o) for o in overrides),
            f"}})) as {type_name};",
        ])
    else:
        overrides = build_transform(output_shape.fields, field_name, TransformDirection.DECODE, scalars)
        implementation = "\n".join([
            f"{head} {field_name} && ({{",
            f"{INDENT}...{field_name},",
            *(_indent(o) for o in overrides),
            f"}}) as {type_name};",
        ])

    return f"{comment}\n{implementation}"


def generate_input_transformer(
    operation_name: str,
    variables_type: str,
    has_required_variables: bool,
    variables_shape: dict[str, Shape] | None,
    scalars: ScalarRegistry | None = None,
) -> str:
    """Generate ``<operation>Input``, which encodes JSON-text variables.

    ``variables_shape`` maps (optionally annotated) variable names to their
    shapes. Without variables the function takes no argument and returns
    ``undefined``.
    """
    variables = ObjectShape.from_mapping(variables_shape or {})
    has_variables = bool(variables.fields)
    has_json = has_json_fields(variables, scalars)

    if has_variables:
        param_doc = f" * @param variables `{variables_type}` - The original variables"
        returns_doc = f" * @returns `{variables_type}` - The transformed variables"
    else:
        param_doc = " *"
        returns_doc = " * @returns `undefined`"
    comment = "\n".join([
        "/**",
        f" * Input transformer function for `{operation_name}`.",
        " * It transforms the fields of the variables into JSON strings.",
        " * If the variables contain JSON fields, it will automatically JSON stringify these fields"
        " and return a new `variables` object.",
        " * If the variables do not contain any JSON fields, it will return the original `variables` object.",
        " * If no variables are defined, the function returns `undefined`.",
        param_doc,
        returns_doc,
        " */",
    ])

    if not has_variables:
        return f"{comment}\nexport const {operation_name}Input = () => undefined;"

    signature = generate_variables_signature(has_required_variables, variables_type)
    head = f"export const {operation_name}Input = ({signature}) =>"
    if not has_json:
        implementation = f"{head} {VARIABLES_PARAMETER} as {variables_type};"
    else:
        overrides = build_transform(variables.fields, VARIABLES_PARAMETER, TransformDirection.ENCODE, scalars)
        implementation = "\n".join([
            f"{head} {VARIABLES_PARAMETER} && ({{",
            f"{INDENT}...{VARIABLES_PARAMETER},",
            *(_indent(o) for o in overrides),
            f"}}) as {variables_type};",
        ])

    return f"{comment}\n{implementation}"
