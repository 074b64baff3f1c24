"""Tests for the type-description renderer and parser."""

import pytest

from tplschema.extractor import infer
from tplschema.generator.description import parse_description, render
from tplschema.schema.models import BOOLEAN, STRING, ArrayNode, ObjectNode


class TestRender:
    def test_flat(self):
        schema = infer("Hi {{name}} {{#if isPro}}X{{/if}}")
        assert render(schema) == (
            "TemplateData {\n"
            "  name: string;\n"
            "  isPro: boolean;\n"
            "}"
        )

    def test_primitive_array(self):
        assert render(infer("{{#each tags}}{{this}}{{/each}}"), "Tags") == (
            "Tags {\n"
            "  tags: string[];\n"
            "}"
        )

    def test_record_array(self):
        schema = infer("{{#each items}}{{this.name}} {{this.price}}{{/each}}")
        assert render(schema, "Order") == (
            "Order {\n"
            "  items: {\n"
            "    name: string;\n"
            "    price: string;\n"
            "  }[];\n"
            "}"
        )

    def test_deep_nesting(self):
        assert render(infer("{{user.profile.name}}")) == (
            "TemplateData {\n"
            "  user: {\n"
            "    profile: {\n"
            "      name: string;\n"
            "    };\n"
            "  };\n"
            "}"
        )

    def test_array_inside_record_array_item(self):
        schema = ObjectNode({
            "posts": ArrayNode(ObjectNode({
                "meta": ObjectNode({"draft": BOOLEAN}),
            })),
        })
        assert render(schema) == (
            "TemplateData {\n"
            "  posts: {\n"
            "    meta: {\n"
            "      draft: boolean;\n"
            "    };\n"
            "  }[];\n"
            "}"
        )

    def test_empty_schema(self):
        assert render(ObjectNode(), "Empty") == "Empty {\n}"

    def test_empty_record_array(self):
        assert render(infer("{{#each rows}}<tr></tr>{{/each}}")) == (
            "TemplateData {\n"
            "  rows: {\n"
            "  }[];\n"
            "}"
        )

    def test_does_not_mutate(self):
        schema = infer("{{a.b}} {{#each c}}{{this.d}}{{/each}}")
        before = repr(schema)
        render(schema)
        assert repr(schema) == before

    def test_rejects_non_node(self):
        with pytest.raises(TypeError):
            render(ObjectNode({"bad": "string"}))


class TestParseDescription:
    def test_round_trip_inferred(self):
        text = (
            "{{#each features}}{{this}}{{/each}}"
            "{{#each articles}}{{this.title}}{{this.author.name}}{{/each}}"
            "{{user.profile.name}} {{#if user.active}}{{/if}}"
            "{{#unless hidden}}{{/unless}} {{items[0]}}"
        )
        schema = infer(text)
        assert parse_description(render(schema, "Newsletter")) == ("Newsletter", schema)

    def test_round_trip_preserves_order(self):
        schema = infer("{{#if z}}{{/if}}{{b}}{{a}}{{#each m}}{{this}}{{/each}}")
        _, parsed = parse_description(render(schema))
        assert list(parsed.fields) == list(schema.fields)

    def test_indentation_not_significant(self):
        name, schema = parse_description("T {\nuser: {\nname: string;\n};\n}")
        assert name == "T"
        assert schema == ObjectNode({"user": ObjectNode({"name": STRING})})

    def test_blank_lines_ignored(self):
        _, schema = parse_description("\nT {\n\n  a: string[];\n}\n\n")
        assert schema == ObjectNode({"a": ArrayNode(STRING)})

    def test_empty_text(self):
        with pytest.raises(ValueError, match="empty"):
            parse_description("   \n")

    def test_bad_header(self):
        with pytest.raises(ValueError, match="line 1"):
            parse_description("a: string;\n}")

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_description("T {\n  n: number;\n}")

    def test_boolean_array_rejected(self):
        with pytest.raises(ValueError, match="string\\[\\]"):
            parse_description("T {\n  flags: boolean[];\n}")

    def test_unterminated(self):
        with pytest.raises(ValueError, match="unterminated"):
            parse_description("T {\n  a: string;")

    def test_unbalanced_block(self):
        with pytest.raises(ValueError):
            parse_description("T {\n  u: {\n    a: string;\n}")

    def test_trailing_content(self):
        with pytest.raises(ValueError, match="after closing"):
            parse_description("T {\n}\nextra: string;")

    def test_duplicate_field(self):
        with pytest.raises(ValueError, match="duplicate"):
            parse_description("T {\n  a: string;\n  a: boolean;\n}")
