"""Tests for the page repository and PageRecord coercion."""

import json

from docgraph.models.page import PageRecord
from docgraph.services.repository import InMemoryPageRepository, load_manifest


# ---------------------------------------------------------------------------
# PageRecord coercion
# ---------------------------------------------------------------------------

class TestPageRecord:
    def test_slug_string_is_normalised(self):
        page = PageRecord(slugs="guides/x")
        assert page.slugs == ["guides", "x"]
        assert page.url == "/docs/guides/x"

    def test_missing_slug_is_root(self):
        page = PageRecord(slugs=None)
        assert page.slugs == []
        assert page.url == "/docs"

    def test_non_string_title_is_coerced(self):
        page = PageRecord(slugs=["a"], title=123, description=None)
        assert page.title == "123"
        assert page.description == ""

    def test_non_list_link_references_become_empty(self):
        page = PageRecord(slugs=["a"], link_references="guides/x")
        assert page.link_references == []

    def test_camel_case_aliases_accepted(self):
        page = PageRecord.model_validate(
            {
                "slug": "guides/x",
                "title": "X",
                "linkReferences": ["guides/y"],
                "absolutePath": "/content/guides/x.mdx",
            }
        )
        assert page.slugs == ["guides", "x"]
        assert page.link_references == ["guides/y"]
        assert page.absolute_path == "/content/guides/x.mdx"


# ---------------------------------------------------------------------------
# InMemoryPageRepository
# ---------------------------------------------------------------------------

class TestInMemoryPageRepository:
    def _repo(self):
        return InMemoryPageRepository(
            [
                PageRecord(slugs=[], title="Home"),
                PageRecord(slugs="guides/x", title="X"),
                PageRecord(slugs="guides/x", title="Duplicate X"),
            ]
        )

    def test_preserves_enumeration_order(self):
        titles = [p.title for p in self._repo().get_pages()]
        assert titles == ["Home", "X", "Duplicate X"]

    def test_lookup_by_segments(self):
        assert self._repo().get_page(["guides", "x"]).title == "X"

    def test_lookup_root(self):
        assert self._repo().get_page([]).title == "Home"

    def test_lookup_miss_returns_none(self):
        assert self._repo().get_page(["guides", "missing"]) is None

    def test_get_pages_returns_a_copy(self):
        repo = self._repo()
        repo.get_pages().clear()
        assert len(repo.get_pages()) == 3

    def test_from_records_skips_invalid_entries(self):
        repo = InMemoryPageRepository.from_records(
            [{"slug": "a", "title": "A"}, "not a page", {"slug": "b", "absolutePath": ["x"]}]
        )
        assert [p.title for p in repo.get_pages()] == ["A"]


# ---------------------------------------------------------------------------
# load_manifest
# ---------------------------------------------------------------------------

class TestLoadManifest:
    def test_object_manifest(self, tmp_path):
        manifest = tmp_path / "index.json"
        manifest.write_text(
            json.dumps({"pages": [{"slug": "", "title": "Home"}, {"slug": "guides/x", "title": "X"}]})
        )
        repo = load_manifest(manifest)
        assert [p.url for p in repo.get_pages()] == ["/docs", "/docs/guides/x"]

    def test_list_manifest(self, tmp_path):
        manifest = tmp_path / "index.json"
        manifest.write_text(json.dumps([{"slug": ["a"], "title": "A"}]))
        assert len(load_manifest(manifest)) == 1

    def test_missing_manifest_is_empty(self, tmp_path):
        assert load_manifest(tmp_path / "missing.json").get_pages() == []

    def test_malformed_manifest_is_empty(self, tmp_path):
        manifest = tmp_path / "index.json"
        manifest.write_text("{not json")
        assert load_manifest(manifest).get_pages() == []

    def test_manifest_without_page_list_is_empty(self, tmp_path):
        manifest = tmp_path / "index.json"
        manifest.write_text(json.dumps({"pages": "nope"}))
        assert load_manifest(manifest).get_pages() == []
