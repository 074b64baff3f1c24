"""Schema package - typed models for an inferred template data shape.

- models.py: Path notation, schema node types, first-write-wins insertion
- loader.py: YAML serialization/deserialization
"""

from .loader import DEFAULT_ROOT_NAME, dump_schema, load_schema, save_schema
from .models import (
    BOOLEAN,
    SELF_KEYWORD,
    STRING,
    ArrayNode,
    FieldPath,
    Leaf,
    LeafKind,
    ObjectNode,
    SchemaNode,
    format_path,
    insert_if_absent,
    is_self_reference,
    parse_path,
    schema_from_dict,
    schema_to_dict,
)

__all__ = [
    # Models
    "ArrayNode",
    "BOOLEAN",
    "FieldPath",
    "Leaf",
    "LeafKind",
    "ObjectNode",
    "SELF_KEYWORD",
    "STRING",
    "SchemaNode",
    # Paths
    "format_path",
    "is_self_reference",
    "parse_path",
    # Building
    "insert_if_absent",
    # Plain data / YAML
    "DEFAULT_ROOT_NAME",
    "dump_schema",
    "load_schema",
    "save_schema",
    "schema_from_dict",
    "schema_to_dict",
]
