"""Tests for docgraph.services.category.classify."""

import pytest

from docgraph.services.category import classify


class TestClassify:
    @pytest.mark.parametrize(
        "segments, expected",
        [
            (["examples", "auth"], "example"),
            (["api-reference", "client"], "api"),
            (["getting-started", "intro"], "getting-started"),
            (["guides", "testing"], "guide"),
            (["troubleshooting"], "other"),
        ],
    )
    def test_first_segment_rules(self, segments, expected):
        assert classify(segments) == expected

    def test_section_index_page_uses_its_section(self):
        assert classify(["guides"]) == "guide"

    def test_root_is_other(self):
        assert classify([]) == "other"

    def test_only_first_segment_matters(self):
        assert classify(["misc", "examples"]) == "other"
