"""Resolve root fields of a schema into field shape trees.

The transformer generator only needs to know where JSON-text scalars sit
inside an operation's result and variables; this module derives that from
the declared types in the IR.
"""

from dataclasses import dataclass, field

from .ir import IRField, IROperation, IRSchema
from .scalars import DEFAULT_REGISTRY, ScalarRegistry
from .shapes import ObjectShape, ScalarShape, Shape, ShapeField, annotate_name

UNKNOWN_TYPE = "unknown"
DEFAULT_MAX_DEPTH = 4


@dataclass
class OutputType:
    """Shape of an operation's root result field."""
    field_name: str
    type_name: str
    shape: Shape = field(default_factory=ObjectShape)
    is_list: bool = False


class TypeResolver:
    """Builds shape trees from an IRSchema.

    Object, input and interface types become object shapes; scalars, enums
    and anything unknown become scalar shapes named after their type.

    Object-typed fields are only expanded when their type can reach a
    JSON-text scalar; the rest are left out and pass through untouched in
    the generated code. A field referring back to a type already on the
    current path is left out too, and objects nested deeper than
    ``max_depth`` below the requested type are not expanded.
    """

    def __init__(
        self,
        schema: IRSchema,
        scalars: ScalarRegistry | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.schema = schema
        self.scalars = scalars or DEFAULT_REGISTRY
        self.max_depth = max_depth
        self._fields = schema.root_fields
        self._json_types = self._find_json_types()

    def get_field(self, name: str) -> IROperation | None:
        return self._fields.get(name)

    def get_output_type(self, root: IROperation | None, field_name: str = "") -> OutputType:
        """Shape of the result of ``root``; an empty object shape if it is unknown."""
        if root is None:
            return OutputType(field_name=field_name, type_name=UNKNOWN_TYPE)
        type_name = root.return_type
        if root.is_return_list:
            type_name = f"Array<{type_name}>"
        return OutputType(
            field_name=root.name,
            type_name=type_name,
            shape=self.get_shape(root.return_type),
            is_list=root.is_return_list,
        )

    def get_input_variables_type(self, root: IROperation | None) -> dict[str, Shape]:
        """Shapes of the arguments of ``root`` keyed by annotated argument name."""
        if root is None:
            return {}
        return {
            annotate_name(arg.name, not arg.is_optional, arg.is_list): self.get_shape(arg.type_name)
            for arg in root.arguments
        }

    def reaches_json(self, type_name: str) -> bool:
        """Whether a value of ``type_name`` can hold a JSON-text scalar at any depth."""
        return self.scalars.has(type_name) or type_name in self._json_types

    def get_shape(self, type_name: str, path: frozenset[str] = frozenset(), depth: int = 0) -> Shape:
        """Shape tree for a named type."""
        ir_type = self.schema.get_type_by_name(type_name)
        if ir_type is None:
            return ScalarShape(type_name)

        path = path | {type_name}
        fields = []
        for f in ir_type.fields:
            if f.type_name in path:
                continue
            if self.schema.get_type_by_name(f.type_name) is not None:
                if depth >= self.max_depth or not self.reaches_json(f.type_name):
                    continue
            fields.append(self._shape_field(f, path, depth + 1))
        return ObjectShape(tuple(fields))

    def _shape_field(self, f: IRField, path: frozenset[str], depth: int) -> ShapeField:
        return ShapeField(
            name=f.name,
            shape=self.get_shape(f.type_name, path, depth),
            mandatory=not f.is_optional,
            is_array=f.is_list,
        )

    def _find_json_types(self) -> set[str]:
        """Names of the object, input and interface types that can reach a JSON-text scalar."""
        composite = {**self.schema.interfaces, **self.schema.inputs, **self.schema.types}
        found = {
            name for name, ir_type in composite.items()
            if any(self.scalars.has(f.type_name) for f in ir_type.fields)
        }
        changed = True
        while changed:
            changed = False
            for name, ir_type in composite.items():
                if name not in found and any(f.type_name in found for f in ir_type.fields):
                    found.add(name)
                    changed = True
        return found
