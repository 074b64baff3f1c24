"""Description renderer - serializes a schema as a type declaration.

Output grammar (2-space indent per level)::

    TemplateData {
      name: string;
      isPro: boolean;
      tags: string[];
      user: {
        email: string;
      };
      items: {
        price: string;
      }[];
    }

``parse_description`` reads the same grammar back into a schema, so a saved
description can be compared against a template's current shape.
"""

import re

from tplschema.schema.loader import DEFAULT_ROOT_NAME
from tplschema.schema.models import ArrayNode, Leaf, LeafKind, ObjectNode

INDENT = "  "


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render(schema: ObjectNode, root_name: str = DEFAULT_ROOT_NAME) -> str:
    """Render a schema as a named, brace-delimited type description."""
    lines = [f"{root_name} {{"]
    _render_fields(schema, 1, lines)
    lines.append("}")
    return "\n".join(lines)


def _render_fields(obj: ObjectNode, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth
    for name, node in obj.fields.items():
        if isinstance(node, Leaf):
            lines.append(f"{pad}{name}: {node.kind.value};")
        elif isinstance(node, ArrayNode):
            if isinstance(node.element, Leaf):
                lines.append(f"{pad}{name}: {node.element.kind.value}[];")
            else:
                lines.append(f"{pad}{name}: {{")
                _render_fields(node.element, depth + 1, lines)
                lines.append(f"{pad}}}[];")
        elif isinstance(node, ObjectNode):
            lines.append(f"{pad}{name}: {{")
            _render_fields(node, depth + 1, lines)
            lines.append(f"{pad}}};")
        else:
            raise TypeError(f"Not a schema node: {node!r}")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_HEADER_RE = re.compile(r"^(\S+) \{$")
_FIELD_RE = re.compile(r"^(\S+): (string|boolean)(\[\])?;$")
_OPEN_RE = re.compile(r"^(\S+): \{$")
_CLOSE_RE = re.compile(r"^\}(\[\])?;$")


def parse_description(text: str) -> tuple[str, ObjectNode]:
    """Parse a rendered description back into ``(root_name, schema)``.

    Indentation is not significant; nesting follows the braces.

    Raises:
        ValueError: On any line outside the description grammar, or
            unbalanced braces.
    """
    root_name = None
    root = ObjectNode()
    # (field name, object being filled) for each open inline block
    stack: list[tuple[str, ObjectNode]] = []
    closed = False

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if closed:
            raise ValueError(f"line {lineno}: content after closing brace")

        if root_name is None:
            m = _HEADER_RE.match(line)
            if not m:
                raise ValueError(f"line {lineno}: expected '<Name> {{', got {line!r}")
            root_name = m.group(1)
            continue

        current = stack[-1][1] if stack else root

        m = _FIELD_RE.match(line)
        if m:
            name, kind, is_array = m.groups()
            leaf = Leaf(LeafKind(kind))
            if is_array and leaf.kind is not LeafKind.STRING:
                raise ValueError(f"line {lineno}: only string[] arrays are supported")
            _add_field(current, name, ArrayNode(leaf) if is_array else leaf, lineno)
            continue

        m = _OPEN_RE.match(line)
        if m:
            stack.append((m.group(1), ObjectNode()))
            continue

        m = _CLOSE_RE.match(line)
        if m and stack:
            name, obj = stack.pop()
            parent = stack[-1][1] if stack else root
            _add_field(parent, name, ArrayNode(obj) if m.group(1) else obj, lineno)
            continue

        if line == "}" and not stack:
            closed = True
            continue

        raise ValueError(f"line {lineno}: unrecognized line {line!r}")

    if root_name is None:
        raise ValueError("empty description")
    if not closed:
        raise ValueError("unterminated description: missing closing brace")
    return root_name, root


def _add_field(obj: ObjectNode, name: str, node, lineno: int) -> None:
    if name in obj.fields:
        raise ValueError(f"line {lineno}: duplicate field {name!r}")
    obj.fields[name] = node
