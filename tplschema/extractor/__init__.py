"""Template extraction engine - derives a data schema from template text.

Scans Handlebars-style markers (variables, each-loops, if/unless guards)
and builds the nested schema of the data object the template expects.
"""

from .inference import SchemaBuilder, infer, infer_element
from .patterns import (
    Reference,
    extract_ifs,
    extract_loops,
    extract_unlesses,
    extract_variables,
    guard_paths,
    is_guard,
)

__all__ = [
    "Reference",
    "SchemaBuilder",
    "extract_ifs",
    "extract_loops",
    "extract_unlesses",
    "extract_variables",
    "guard_paths",
    "infer",
    "infer_element",
    "is_guard",
]
