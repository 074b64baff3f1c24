"""Tests for the templates.json catalog."""

import json

import pytest

from tplschema.catalog.templates import (
    TemplateEntry,
    load_catalog,
    read_default_content,
    read_template,
    resolve_entry,
)


@pytest.fixture
def catalog_dir(tmp_path):
    """A template directory with two templates, newsletter flagged default."""
    (tmp_path / "templates.json").write_text(json.dumps([
        {"id": "welcome-email", "name": "Welcome Email", "file": "welcome.hbs"},
        {"id": "newsletter", "name": "Newsletter", "file": "newsletter.hbs",
         "defaultContent": "newsletter.json", "default": True},
    ]))
    (tmp_path / "welcome.hbs").write_text("Hi {{firstName}}")
    (tmp_path / "newsletter.hbs").write_text("{{#each articles}}{{this.title}}{{/each}}")
    (tmp_path / "newsletter.json").write_text(json.dumps({"newsletterTitle": "Tech Weekly"}))
    return tmp_path


def _entry(id, **kw):
    return TemplateEntry(id=id, name=id, file=f"{id}.hbs", **kw)


class TestLoadCatalog:
    def test_entries(self, catalog_dir):
        entries = load_catalog(catalog_dir)
        assert [e.id for e in entries] == ["welcome-email", "newsletter"]
        assert entries[1].default_content == "newsletter.json"
        assert entries[1].default is True
        assert entries[0].default is False

    def test_name_defaults_to_id(self, tmp_path):
        (tmp_path / "templates.json").write_text('[{"id": "a", "file": "a.hbs"}]')
        assert load_catalog(tmp_path)[0].name == "a"

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "templates.json").write_text("{not json")
        with pytest.raises(ValueError, match="invalid JSON"):
            load_catalog(tmp_path)

    def test_not_a_list(self, tmp_path):
        (tmp_path / "templates.json").write_text('{"id": "a"}')
        with pytest.raises(ValueError, match="list"):
            load_catalog(tmp_path)

    def test_entry_without_file(self, tmp_path):
        (tmp_path / "templates.json").write_text('[{"id": "a"}]')
        with pytest.raises(ValueError, match="entry 0"):
            load_catalog(tmp_path)

    def test_optional_keys_absent(self, catalog_dir):
        entry = load_catalog(catalog_dir)[0]
        assert entry.default_content is None
        assert entry.file == "welcome.hbs"


class TestResolveEntry:
    def test_explicit_id(self):
        entries = [_entry("a"), _entry("b", default=True)]
        assert resolve_entry(entries, "a").id == "a"

    def test_unknown_id(self):
        with pytest.raises(ValueError, match="Available: a"):
            resolve_entry([_entry("a")], "zzz")

    def test_flagged_default(self):
        entries = [_entry("welcome-email"), _entry("b", default=True)]
        assert resolve_entry(entries).id == "b"

    def test_fallback_id(self):
        entries = [_entry("a"), _entry("welcome-email")]
        assert resolve_entry(entries).id == "welcome-email"

    def test_first_entry(self):
        assert resolve_entry([_entry("a"), _entry("b")]).id == "a"

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            resolve_entry([])


class TestReadFiles:
    def test_read_template(self, catalog_dir):
        entry = resolve_entry(load_catalog(catalog_dir), "welcome-email")
        assert read_template(catalog_dir, entry) == "Hi {{firstName}}"

    def test_missing_template(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_template(tmp_path, _entry("gone"))

    def test_default_content(self, catalog_dir):
        entry = resolve_entry(load_catalog(catalog_dir))
        assert read_default_content(catalog_dir, entry) == {"newsletterTitle": "Tech Weekly"}

    def test_no_default_content(self, catalog_dir):
        assert read_default_content(catalog_dir, _entry("a")) is None

    def test_default_content_not_object(self, tmp_path):
        (tmp_path / "d.json").write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            read_default_content(tmp_path, _entry("a", default_content="d.json"))

    def test_default_content_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_default_content(tmp_path, _entry("a", default_content="d.json"))
