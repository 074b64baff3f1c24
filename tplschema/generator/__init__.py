"""Generators - text and data produced from an inferred schema.

- description.py: type-declaration rendering and its parser
- sample_data.py: placeholder payloads conforming to a schema
"""

from .description import parse_description, render
from .sample_data import sample_data

__all__ = [
    "parse_description",
    "render",
    "sample_data",
]
