"""Schema inference - derive the expected data shape from template text.

The builder runs the extractors in a fixed order and accumulates every path
into one root ObjectNode with first-write-wins semantics:

1. Loop blocks become arrays. A body that uses ``{{this}}`` gives a string
   array; otherwise the ``{{this.x}}`` references in the body give the
   item's object fields.
2. Bare variables become leaves. A variable is boolean when the same path
   guards an ``if``/``unless`` block anywhere in the template, else string.
3. ``if`` then ``unless`` guards become boolean leaves (only new paths land).

Paths rooted at ``this`` never reach the top-level schema.

Usage::

    from tplschema.extractor import infer

    schema = infer("Hi {{name}} {{#if isPro}}Pro{{/if}}")
    schema.get(("isPro",))   # Leaf(kind=LeafKind.BOOLEAN)
"""

import logging

from tplschema.schema.models import (
    BOOLEAN,
    STRING,
    ArrayNode,
    Leaf,
    ObjectNode,
    insert_if_absent,
    is_self_reference,
)

from .patterns import (
    extract_ifs,
    extract_item_fields,
    extract_loops,
    extract_unlesses,
    extract_variables,
    guard_paths,
    has_bare_item,
)

logger = logging.getLogger(__name__)


def infer_element(body: str) -> Leaf | ObjectNode:
    """Infer the item type of a loop from its body text."""
    if has_bare_item(body):
        return STRING
    item = ObjectNode()
    for path in extract_item_fields(body):
        insert_if_absent(item, path, STRING)
    return item


class SchemaBuilder:
    """Accumulates one template's references into a schema.

    A builder is single-use; ``infer`` creates a fresh one per call.
    """

    def __init__(self, text: str):
        self.text = text
        self.schema = ObjectNode()
        self._guards = guard_paths(text)

    def build(self) -> ObjectNode:
        """Run all passes in order and return the root object."""
        self._add_loops()
        self._add_variables()
        self._add_guards()
        return self.schema

    def _add_loops(self) -> None:
        count = 0
        for ref in extract_loops(self.text):
            count += insert_if_absent(self.schema, ref.path, ArrayNode(infer_element(ref.body)))
        logger.debug("Loops: %d array path(s) inserted", count)

    def _add_variables(self) -> None:
        count = 0
        for ref in extract_variables(self.text):
            if is_self_reference(ref.path):
                continue
            kind = BOOLEAN if ref.path in self._guards else STRING
            count += insert_if_absent(self.schema, ref.path, kind)
        logger.debug("Variables: %d leaf path(s) inserted", count)

    def _add_guards(self) -> None:
        count = 0
        for extract in (extract_ifs, extract_unlesses):
            for ref in extract(self.text):
                if not is_self_reference(ref.path):
                    count += insert_if_absent(self.schema, ref.path, BOOLEAN)
        logger.debug("Guards: %d guard-only path(s) inserted", count)


def infer(text: str) -> ObjectNode:
    """Infer the data schema a template expects, without rendering it."""
    return SchemaBuilder(text).build()
