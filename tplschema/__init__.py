"""template-schema: static data-shape inference for logic-less templates.

Provides the pipeline from template text to typed schema:

- schema/: Schema node types, path notation, YAML loader
- extractor/: Pattern extractors and the schema builder (``infer``)
- generator/: Type-description rendering/parsing and sample data
- catalog/: templates.json lookup for template directories
"""

from tplschema.extractor import infer
from tplschema.generator import parse_description, render, sample_data

__all__ = ["infer", "parse_description", "render", "sample_data"]
