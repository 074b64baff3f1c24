"""Pattern extractors - scan raw template text for data references.

Four independent scanners, each first-match, left to right, non-overlapping:

    Loop      {{#each path}} body {{/each}}   (non-greedy, no nesting)
    Variable  {{path}}                        (not a #, /, ^ or ! marker)
    If        {{#if path}}
    Unless    {{#unless path}}

Every scanner is a generator that re-scans from the start of the text on
each call.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from tplschema.schema.models import SELF_KEYWORD, FieldPath, parse_path

LOOP_PATTERN = re.compile(r"\{\{#each\s+([\w.]+)\}\}([\s\S]*?)\{\{/each\}\}")
VARIABLE_PATTERN = re.compile(r"\{\{(?!#|/|\^|!)([\w.\[\]]+)\}\}")
IF_PATTERN = re.compile(r"\{\{#if\s+([\w.]+)\}\}")
UNLESS_PATTERN = re.compile(r"\{\{#unless\s+([\w.]+)\}\}")

# Inside a loop body
ITEM_FIELD_PATTERN = re.compile(r"\{\{(?!#|/|\^|!)" + SELF_KEYWORD + r"\.([\w.]+)\}\}")
BARE_ITEM_MARKER = "{{" + SELF_KEYWORD + "}}"


@dataclass(frozen=True)
class Reference:
    """A path found in the template, with the loop body for loop blocks."""
    path: FieldPath
    body: str | None = None


def _scan(pattern: re.Pattern, text: str) -> Iterator[Reference]:
    for m in pattern.finditer(text):
        path = parse_path(m.group(1))
        if not path:
            continue
        body = m.group(2) if pattern.groups > 1 else None
        yield Reference(path, body)


def extract_loops(text: str) -> Iterator[Reference]:
    """Yield each ``{{#each}}`` block's path and raw inner body.

    A nested loop's ``{{/each}}`` closes the outer block.
    """
    return _scan(LOOP_PATTERN, text)


def extract_variables(text: str) -> Iterator[Reference]:
    """Yield every bare ``{{path}}`` reference, including ``this`` ones."""
    return _scan(VARIABLE_PATTERN, text)


def extract_ifs(text: str) -> Iterator[Reference]:
    return _scan(IF_PATTERN, text)


def extract_unlesses(text: str) -> Iterator[Reference]:
    return _scan(UNLESS_PATTERN, text)


def extract_item_fields(body: str) -> Iterator[FieldPath]:
    """Yield the suffix path of every ``{{this.<suffix>}}`` in a loop body."""
    for m in ITEM_FIELD_PATTERN.finditer(body):
        path = parse_path(m.group(1))
        if path:
            yield path


def has_bare_item(body: str) -> bool:
    """True if the loop body uses the current item itself (``{{this}}``)."""
    return BARE_ITEM_MARKER in body


def guard_paths(text: str) -> set[FieldPath]:
    """All paths used as an ``if``/``unless`` guard anywhere in the text."""
    guards = {ref.path for ref in extract_ifs(text)}
    guards.update(ref.path for ref in extract_unlesses(text))
    return guards


def is_guard(text: str, path: FieldPath) -> bool:
    """True if ``path`` is the guard of some ``if``/``unless`` block in the text."""
    return path in guard_paths(text)
