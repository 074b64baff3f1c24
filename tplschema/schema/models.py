"""Schema models - the inferred data shape of a template.

A schema is a tree of three node kinds:

- Leaf:       a scalar field, either ``string`` or ``boolean``
- ObjectNode: named child fields, in insertion order
- ArrayNode:  a list whose items are a string Leaf or an ObjectNode

The root of every inferred schema is an ObjectNode. All writes go through
``insert_if_absent`` so that the first node assigned to a path is never
replaced.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

# Loop-body token for the current item
SELF_KEYWORD = "this"

FieldPath = tuple[str, ...]


# ---------------------------------------------------------------------------
# Path notation
# ---------------------------------------------------------------------------

def parse_path(text: str) -> FieldPath:
    """Split a dotted reference into its segments.

    Empty segments (``a..b``, a leading or trailing dot) are dropped.
    Bracketed segments such as ``items[0]`` are kept whole.
    """
    return tuple(seg for seg in text.split(".") if seg)


def format_path(path: FieldPath) -> str:
    return ".".join(path)


def is_self_reference(path: FieldPath) -> bool:
    """True if the path starts at the current loop item."""
    return bool(path) and path[0] == SELF_KEYWORD


# ---------------------------------------------------------------------------
# Schema nodes
# ---------------------------------------------------------------------------

class LeafKind(Enum):
    """Scalar types the engine can infer."""
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Leaf:
    kind: LeafKind = LeafKind.STRING


@dataclass
class ObjectNode:
    """Named fields of an object, keyed by path segment."""
    fields: dict[str, "SchemaNode"] = field(default_factory=dict)

    def get(self, path: FieldPath) -> "SchemaNode | None":
        """Look up the node at a nested path, or None if absent."""
        node: SchemaNode = self
        for seg in path:
            if not isinstance(node, ObjectNode) or seg not in node.fields:
                return None
            node = node.fields[seg]
        return node

    def paths(self) -> list[FieldPath]:
        """Every leaf and array path below this object, depth first.

        Fields of record-array items appear under ``name[]``, e.g.
        ``("items[]", "price")``.
        """
        out: list[FieldPath] = []
        for name, child in self.fields.items():
            if isinstance(child, ObjectNode):
                out.extend((name,) + p for p in child.paths())
            elif isinstance(child, ArrayNode) and not child.is_primitive and child.element.fields:
                out.extend((f"{name}[]",) + p for p in child.element.paths())
            else:
                out.append((name,))
        return out


@dataclass(frozen=True)
class ArrayNode:
    """A list of primitive strings or of records."""
    element: Union[Leaf, ObjectNode]

    @property
    def is_primitive(self) -> bool:
        return isinstance(self.element, Leaf)


SchemaNode = Union[Leaf, ObjectNode, ArrayNode]

STRING = Leaf(LeafKind.STRING)
BOOLEAN = Leaf(LeafKind.BOOLEAN)


def insert_if_absent(schema: ObjectNode, path: FieldPath, node: SchemaNode) -> bool:
    """Assign ``node`` at ``path`` unless something already claims it.

    Missing intermediate objects are created. If an intermediate segment
    already holds a Leaf or ArrayNode the insertion is dropped, as is any
    write to a path that already has a node.

    Returns:
        True if the node was inserted, False if the write was a no-op.
    """
    if not path:
        return False

    current = schema
    for depth, seg in enumerate(path[:-1]):
        child = current.fields.get(seg)
        if child is None:
            child = ObjectNode()
            current.fields[seg] = child
        elif not isinstance(child, ObjectNode):
            logger.debug("Dropped %s: %s is already a %s",
                         format_path(path), format_path(path[:depth + 1]),
                         type(child).__name__)
            return False
        current = child

    last = path[-1]
    if last in current.fields:
        return False
    current.fields[last] = node
    return True


# ---------------------------------------------------------------------------
# Plain-data form
# ---------------------------------------------------------------------------

def node_to_data(node: SchemaNode):
    """Convert a node to plain data: "string", "boolean", dict, or [element]."""
    if isinstance(node, Leaf):
        return node.kind.value
    if isinstance(node, ArrayNode):
        return [node_to_data(node.element)]
    return {name: node_to_data(child) for name, child in node.fields.items()}


def node_from_data(data, where: str = "<root>") -> SchemaNode:
    """Inverse of ``node_to_data``.

    Raises:
        ValueError: If ``data`` is not a valid plain-data schema node.
    """
    if isinstance(data, str):
        try:
            return Leaf(LeafKind(data))
        except ValueError:
            raise ValueError(f"Unknown leaf type {data!r} at {where}") from None
    if isinstance(data, list):
        if len(data) != 1:
            raise ValueError(f"Array at {where} must have exactly one element type")
        element = node_from_data(data[0], f"{where}[]")
        if isinstance(element, ArrayNode) or element == BOOLEAN:
            raise ValueError(f"Array at {where} must hold strings or objects")
        return ArrayNode(element)
    if isinstance(data, dict):
        obj = ObjectNode()
        for name, child in data.items():
            obj.fields[str(name)] = node_from_data(child, f"{where}.{name}")
        return obj
    raise ValueError(f"Unsupported schema value {data!r} at {where}")


def schema_to_dict(schema: ObjectNode) -> dict:
    return node_to_data(schema)


def schema_from_dict(data: dict) -> ObjectNode:
    """Build a root schema from its plain-data form."""
    if not isinstance(data, dict):
        raise ValueError("Schema root must be a mapping of field names")
    return node_from_data(data)
