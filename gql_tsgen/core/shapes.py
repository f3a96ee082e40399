"""Field shape trees.

A shape tree describes the declared type of a selected field: leaves are
scalars (carrying their type name as a marker) and inner nodes are objects
whose fields keep schema order.

Field keys arrive from the type resolver in an annotated form, e.g.
``"tags[]!"``: a trailing ``!`` marks a non-null field and, once that is
stripped, a trailing ``[]`` marks a list. Keys are decoded once, when the
tree is built, into ``ShapeField`` records.
"""

from dataclasses import dataclass, field
from typing import Any, Union

MANDATORY_MARKER = "!"
ARRAY_MARKER = "[]"

# Names a loop variable in the generated TypeScript must not take: reserved
# words, and globals the generated code itself refers to.
RESERVED_IDENTIFIERS = frozenset({
    "arguments", "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "enum", "eval", "export",
    "extends", "false", "finally", "for", "function", "if", "implements",
    "import", "in", "instanceof", "interface", "let", "new", "null", "package",
    "private", "protected", "public", "return", "static", "super", "switch",
    "this", "throw", "true", "try", "typeof", "var", "void", "while", "with",
    "yield", "any", "as", "string", "unknown",
    "Array", "Infinity", "JSON", "NaN", "Object", "Record", "String",
    "undefined",
})


def parse_annotated_name(key: str) -> tuple[str, bool, bool]:
    """Split an annotated key into (name, mandatory, is_array)."""
    mandatory = key.endswith(MANDATORY_MARKER)
    if mandatory:
        key = key[: -len(MANDATORY_MARKER)]
    is_array = key.endswith(ARRAY_MARKER)
    if is_array:
        key = key[: -len(ARRAY_MARKER)]
    return key, mandatory, is_array


def annotate_name(name: str, mandatory: bool = False, is_array: bool = False) -> str:
    """Build an annotated key from a field name and its flags."""
    return f"{name}{ARRAY_MARKER if is_array else ''}{MANDATORY_MARKER if mandatory else ''}"


def element_variable(name: str) -> str:
    """Loop variable for elements of a list named ``name`` (``items`` -> ``item``).

    The last character is dropped; a trailing ``_`` is added when that leaves
    nothing or a reserved identifier (``cases`` -> ``case_``).
    """
    element = name[:-1]
    if not element or element in RESERVED_IDENTIFIERS:
        element += "_"
    return element


@dataclass(frozen=True)
class ScalarShape:
    """A terminal value; marker is the scalar or enum type name."""
    marker: str


@dataclass(frozen=True)
class ShapeField:
    """A decoded field of an object shape."""
    name: str
    shape: "Shape"
    mandatory: bool = False
    is_array: bool = False

    @property
    def element_name(self) -> str:
        """Loop variable used for elements of a list field."""
        return element_variable(self.name)

    @property
    def annotated_name(self) -> str:
        return annotate_name(self.name, self.mandatory, self.is_array)


@dataclass(frozen=True)
class ObjectShape:
    """An object type; fields are kept in declaration order."""
    fields: tuple[ShapeField, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> "ObjectShape":
        """Build a tree from ``{annotated name: marker | nested mapping | Shape}``."""
        fields = []
        for key, value in mapping.items():
            name, mandatory, is_array = parse_annotated_name(key)
            if isinstance(value, dict):
                shape = cls.from_mapping(value)
            elif isinstance(value, (ScalarShape, ObjectShape)):
                shape = value
            else:
                shape = ScalarShape(value)
            fields.append(ShapeField(name=name, shape=shape, mandatory=mandatory, is_array=is_array))
        return cls(tuple(fields))

    def to_mapping(self) -> dict[str, Any]:
        """Return the annotated-key mapping form of this tree."""
        result: dict[str, Any] = {}
        for f in self.fields:
            if isinstance(f.shape, ObjectShape):
                result[f.annotated_name] = f.shape.to_mapping()
            else:
                result[f.annotated_name] = f.shape.marker
        return result

    def __bool__(self) -> bool:
        return bool(self.fields)


Shape = Union[ScalarShape, ObjectShape]
