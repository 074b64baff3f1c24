"""Sample data generator - placeholder payloads that fit an inferred schema.

Used to seed a data editor for a template that has no saved input yet.
"""

from typing import Any

from tplschema.schema.models import ArrayNode, Leaf, LeafKind, ObjectNode


def sample_data(schema: ObjectNode, items: int = 2) -> dict[str, Any]:
    """Build a data object conforming to ``schema``.

    - string leaves hold their own field name
    - boolean leaves are True
    - arrays hold ``items`` entries ("tags 1", "tags 2", ... or records)

    Raises:
        ValueError: If ``items`` is negative.
    """
    if items < 0:
        raise ValueError(f"items must be >= 0, got {items}")
    return _sample_object(schema, items)


def _sample_object(obj: ObjectNode, items: int) -> dict[str, Any]:
    return {name: _sample_node(name, node, items) for name, node in obj.fields.items()}


def _sample_node(name: str, node, items: int) -> Any:
    if isinstance(node, Leaf):
        return True if node.kind is LeafKind.BOOLEAN else name
    if isinstance(node, ArrayNode):
        if isinstance(node.element, Leaf):
            return [f"{name} {i}" for i in range(1, items + 1)]
        return [_sample_object(node.element, items) for _ in range(items)]
    return _sample_object(node, items)
