"""CLI entry point for template-schema.

Infers the data shape a Handlebars-style template expects and prints it as
a type description, YAML, JSON, or sample data.

Usage::

    # Print the type description of a template file
    template-schema infer templates/welcome-email.hbs

    # Same template, looked up through its catalog, as YAML
    template-schema infer --catalog templates --template welcome-email \\
        --format yaml -o schemas/welcome-email.yaml

    # Placeholder data for the catalog's default template
    template-schema sample --catalog templates --items 3

    # List catalog templates
    template-schema list --catalog templates

    # Check a saved description against the current template
    template-schema check schemas/welcome-email.txt templates/welcome-email.hbs
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tplschema.catalog import (
    load_catalog,
    read_default_content,
    read_template,
    resolve_entry,
)
from tplschema.extractor import infer
from tplschema.generator import parse_description, render, sample_data
from tplschema.schema import DEFAULT_ROOT_NAME, dump_schema, format_path, schema_to_dict

FORMATS = ("description", "yaml", "json")


# ---------------------------------------------------------------------------
# Template loading
# ---------------------------------------------------------------------------

def _load_template(args):
    """Return ``(template_text, default_data)`` from a file or the catalog."""
    if getattr(args, "template_file", None):
        path = Path(args.template_file)
        if not path.exists():
            _error(f"Template file not found: {path}")
        return path.read_text(encoding="utf-8"), None

    if not getattr(args, "catalog", None):
        _error("Give a template file or --catalog DIR.")

    try:
        entries = load_catalog(args.catalog)
        entry = resolve_entry(entries, args.template)
        _info(f"Template: {entry.name} ({entry.file})")
        return read_template(args.catalog, entry), read_default_content(args.catalog, entry)
    except (FileNotFoundError, ValueError) as e:
        _error(str(e))


def _emit(text, args):
    """Write ``text`` to --output or stdout."""
    output = getattr(args, "output", None)
    if output:
        out = Path(output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        _info(f"Written: {out}")
    else:
        print(text)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_infer(args):
    """Infer and print a template's schema."""
    text, _ = _load_template(args)
    schema = infer(text)
    _info(f"Inferred {len(schema.paths())} field path(s)")

    if args.format == "yaml":
        _emit(dump_schema(schema, args.root_name).rstrip("\n"), args)
    elif args.format == "json":
        _emit(json.dumps(schema_to_dict(schema), indent=2), args)
    else:
        _emit(render(schema, args.root_name), args)


def cmd_sample(args):
    """Print placeholder input data for a template."""
    text, defaults = _load_template(args)
    try:
        data = sample_data(infer(text), items=args.items)
    except ValueError as e:
        _error(str(e))
    if defaults:
        _info("Overlaying catalog default content")
        data = {**data, **defaults}
    _emit(json.dumps(data, indent=2, ensure_ascii=False), args)


def cmd_list(args):
    """List the templates in a catalog."""
    try:
        entries = load_catalog(args.catalog)
        chosen = resolve_entry(entries)
    except (FileNotFoundError, ValueError) as e:
        _error(str(e))

    for e in entries:
        marker = "*" if e is chosen else " "
        print(f"{marker} {e.id:<24} {e.name}  [{e.file}]")


def cmd_check(args):
    """Compare a saved description with the template's inferred schema."""
    desc_path = Path(args.description)
    tmpl_path = Path(args.template_file)
    for p in (desc_path, tmpl_path):
        if not p.exists():
            _error(f"File not found: {p}")

    try:
        root_name, expected = parse_description(desc_path.read_text(encoding="utf-8"))
    except ValueError as e:
        _error(f"{desc_path}: {e}")

    actual = infer(tmpl_path.read_text(encoding="utf-8"))
    if render(actual, root_name) == render(expected, root_name):
        _info(f"{root_name}: description matches {tmpl_path}")
        return

    want = {format_path(p) for p in expected.paths()}
    have = {format_path(p) for p in actual.paths()}
    for p in sorted(have - want):
        print(f"  + {p}")
    for p in sorted(want - have):
        print(f"  - {p}")
    if want == have:
        print("  field types or order differ")
    _warn(f"{root_name}: description is out of date with {tmpl_path}")
    sys.exit(1)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _info(msg):
    print(f"  {msg}", file=sys.stderr)


def _warn(msg):
    print(f"  WARNING: {msg}", file=sys.stderr)


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="template-schema",
        description="Infer the data schema of logic-less templates.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log extraction details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- infer ----
    inf = subparsers.add_parser(
        "infer",
        help="Print the data schema a template expects.",
    )
    _add_source_args(inf)
    inf.add_argument(
        "--root-name",
        default=DEFAULT_ROOT_NAME,
        help=f"Name of the root type (default: {DEFAULT_ROOT_NAME}).",
    )
    inf.add_argument(
        "--format",
        choices=FORMATS,
        default="description",
        help="Output format (default: description).",
    )
    _add_output_arg(inf)
    inf.set_defaults(func=cmd_infer)

    # ---- sample ----
    smp = subparsers.add_parser(
        "sample",
        help="Print placeholder input data for a template.",
    )
    _add_source_args(smp)
    smp.add_argument(
        "--items",
        type=int,
        default=2,
        help="Entries per array (default: 2).",
    )
    _add_output_arg(smp)
    smp.set_defaults(func=cmd_sample)

    # ---- list ----
    lst = subparsers.add_parser(
        "list",
        help="List catalog templates (* marks the default).",
    )
    lst.add_argument(
        "--catalog",
        required=True,
        help="Template directory containing templates.json.",
    )
    lst.set_defaults(func=cmd_list)

    # ---- check ----
    chk = subparsers.add_parser(
        "check",
        help="Check a saved description against a template.",
    )
    chk.add_argument("description", help="Saved description file.")
    chk.add_argument("template_file", help="Template file.")
    chk.set_defaults(func=cmd_check)

    return parser


def _add_source_args(parser):
    """Add template file / --catalog / --template args to a subparser."""
    parser.add_argument(
        "template_file",
        nargs="?",
        help="Template file to analyze.",
    )
    parser.add_argument(
        "--catalog",
        help="Template directory containing templates.json.",
    )
    parser.add_argument(
        "--template",
        help="Catalog template id (default: the catalog's default).",
    )


def _add_output_arg(parser):
    parser.add_argument(
        "-o", "--output",
        help="Write to this file instead of stdout.",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)-8s | %(name)s | %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
