"""Template catalog package - locating templates and their default data."""

from .templates import (
    CATALOG_FILENAME,
    TemplateEntry,
    load_catalog,
    read_default_content,
    read_template,
    resolve_entry,
)

__all__ = [
    "CATALOG_FILENAME",
    "TemplateEntry",
    "load_catalog",
    "read_default_content",
    "read_template",
    "resolve_entry",
]
