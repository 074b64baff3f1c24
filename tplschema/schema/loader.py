"""Schema loader - YAML serialization and deserialization for inferred schemas.

Provides round-trip save/load so an inferred data shape can be reviewed,
version-controlled, and diffed as a human-readable YAML document::

    name: TemplateData
    fields:
      firstName: string
      isPro: boolean
      tags:
      - string
"""

from pathlib import Path

import yaml

from .models import ObjectNode, schema_from_dict, schema_to_dict

DEFAULT_ROOT_NAME = "TemplateData"


def _document(schema: ObjectNode, root_name: str) -> dict:
    return {"name": root_name, "fields": schema_to_dict(schema)}


def dump_schema(schema: ObjectNode, root_name: str = DEFAULT_ROOT_NAME) -> str:
    """Serialize a schema to a YAML string."""
    return yaml.safe_dump(_document(schema, root_name), default_flow_style=False,
                          sort_keys=False, allow_unicode=True, width=120)


def save_schema(schema: ObjectNode, path: str | Path,
                root_name: str = DEFAULT_ROOT_NAME) -> None:
    """Serialize a schema to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_schema(schema, root_name))


def load_schema(path: str | Path) -> tuple[str, ObjectNode]:
    """Deserialize a schema from a YAML file.

    Returns:
        ``(root_name, schema)``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a schema document.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict) or "fields" not in data:
        raise ValueError(f"{path}: expected a mapping with a 'fields' key")
    fields = data["fields"] or {}
    return str(data.get("name", DEFAULT_ROOT_NAME)), schema_from_dict(fields)
