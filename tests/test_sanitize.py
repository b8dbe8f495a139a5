"""Tests for HTML sanitization."""

import pytest

from blogful.sanitize import sanitize


class TestSanitize:
    def test_plain_text_unchanged(self):
        assert sanitize("Just some words.") == "Just some words."

    def test_none_passthrough(self):
        assert sanitize(None) is None

    def test_script_tag_escaped(self):
        assert sanitize("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_safe_tags_preserved(self):
        text = "Not <strong>all</strong> <em>bad</em>."
        assert sanitize(text) == text

    def test_event_handler_stripped_from_allowed_tag(self):
        result = sanitize('<strong onclick="steal()">hi</strong>')
        assert result == "<strong>hi</strong>"

    def test_event_handler_stripped_from_image(self):
        result = sanitize('<img src="https://example.com/a.png" onerror="alert(1)">')
        assert result == '<img src="https://example.com/a.png">'

    def test_javascript_link_removed(self):
        result = sanitize('<a href="javascript:alert(1)">click</a>')
        assert "javascript:" not in result
        assert "click" in result

    def test_unknown_tag_escaped(self):
        assert sanitize('<iframe src="x"></iframe>') == '&lt;iframe src="x"&gt;&lt;/iframe&gt;'

    @pytest.mark.parametrize(
        "text",
        [
            "<script>alert(1)</script>",
            'Bad <img src="https://example.com/a.png" onerror="x()"> <b>ok</b>',
            "Fish & chips < 5",
            "<strong>kept</strong>",
        ],
    )
    def test_idempotent(self, text):
        once = sanitize(text)
        assert sanitize(once) == once
