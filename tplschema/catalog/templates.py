"""Template catalog - the templates.json index of a template directory.

A template directory looks like::

    templates/
      templates.json
      welcome-email.hbs
      welcome-email.json      # optional default input data

``templates.json`` is a list of entries::

    [{"id": "welcome-email", "name": "Welcome Email",
      "file": "welcome-email.hbs", "defaultContent": "welcome-email.json",
      "default": true}]
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "templates.json"

# Used when no entry is flagged as default
FALLBACK_TEMPLATE_ID = "welcome-email"


@dataclass
class TemplateEntry:
    """One template listed in the catalog."""
    id: str
    name: str
    file: str
    default_content: str | None = None   # JSON file with sample input
    default: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> "TemplateEntry":
        return cls(
            id=d["id"],
            name=d.get("name", d["id"]),
            file=d["file"],
            default_content=d.get("defaultContent"),
            default=bool(d.get("default", False)),
        )


def load_catalog(directory: str | Path) -> list[TemplateEntry]:
    """Read ``templates.json`` from a template directory.

    Raises:
        FileNotFoundError: If the directory has no catalog file.
        ValueError: If the catalog is not a list of entries with id and file.
    """
    path = Path(directory) / CATALOG_FILENAME
    if not path.exists():
        raise FileNotFoundError(f"Template catalog not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of template entries")

    entries = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "id" not in item or "file" not in item:
            raise ValueError(f"{path}: entry {i} needs 'id' and 'file'")
        entries.append(TemplateEntry.from_dict(item))
    logger.debug("Loaded %d template(s) from %s", len(entries), path)
    return entries


def resolve_entry(entries: list[TemplateEntry],
                  template_id: str | None = None) -> TemplateEntry:
    """Pick a catalog entry.

    An explicit ``template_id`` must exist. Otherwise the entry flagged
    ``default`` wins, then the fallback id, then the first entry.

    Raises:
        ValueError: If the id is unknown or the catalog is empty.
    """
    if not entries:
        raise ValueError("Template catalog is empty")

    if template_id is not None:
        for e in entries:
            if e.id == template_id:
                return e
        raise ValueError(
            f"Unknown template '{template_id}'. "
            f"Available: {', '.join(e.id for e in entries)}"
        )

    for e in entries:
        if e.default:
            return e
    for e in entries:
        if e.id == FALLBACK_TEMPLATE_ID:
            return e
    logger.debug("No default template flagged, using %s", entries[0].id)
    return entries[0]


def read_template(directory: str | Path, entry: TemplateEntry) -> str:
    """Read the template source text of a catalog entry."""
    path = Path(directory) / entry.file
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")
    return path.read_text(encoding="utf-8")


def read_default_content(directory: str | Path,
                         entry: TemplateEntry) -> dict | None:
    """Load an entry's default input data, or None if it declares none.

    Raises:
        FileNotFoundError: If the declared file is missing.
        ValueError: If the file is not a JSON object.
    """
    if not entry.default_content:
        return None
    path = Path(directory) / entry.default_content
    if not path.exists():
        raise FileNotFoundError(f"Default content not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: default content must be a JSON object")
    return data
