"""Tests for markdown rendering of summaries."""

import pytest

from meetingnotes.services.markdown import count_words, markdown_to_html


class TestMarkdownToHtml:
    """Tests for markdown_to_html."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_input(self, text):
        assert markdown_to_html(text) == ""

    def test_headings(self):
        html = markdown_to_html("# Title\n## Section\n### Detail")
        assert html == "<h1>Title</h1><h2>Section</h2><h3>Detail</h3>"

    def test_four_hashes_is_not_a_heading(self):
        assert markdown_to_html("#### too deep") == "<p>#### too deep</p>"

    def test_bold_and_italic(self):
        assert markdown_to_html("**bold** and *italic*") == (
            "<p><strong>bold</strong> and <em>italic</em></p>"
        )

    def test_bullet_list_grouped(self):
        html = markdown_to_html("- one\n* two\n- three")
        assert html == "<ul><li>one</li><li>two</li><li>three</li></ul>"

    def test_numbered_list_grouped(self):
        html = markdown_to_html("1. first\n2. second")
        assert html == "<ol><li>first</li><li>second</li></ol>"

    def test_list_kinds_not_merged(self):
        html = markdown_to_html("- a\n1. b")
        assert html == "<ul><li>a</li></ul><ol><li>b</li></ol>"

    def test_paragraphs_and_line_breaks(self):
        html = markdown_to_html("line one\nline two\n\nnext para")
        assert html == "<p>line one<br>line two</p><p>next para</p>"

    def test_mixed_document(self):
        text = "## Decisions\n- Ship **v2**\n\nOwner: *Bob*"
        assert markdown_to_html(text) == (
            "<h2>Decisions</h2><ul><li>Ship <strong>v2</strong></li></ul>"
            "<p>Owner: <em>Bob</em></p>"
        )

    def test_html_is_escaped(self):
        html = markdown_to_html("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_windows_newlines(self):
        assert markdown_to_html("a\r\nb") == "<p>a<br>b</p>"


class TestCountWords:
    """Tests for count_words."""

    def test_plain_text(self):
        assert count_words("Alice proposed shipping v2") == 4

    def test_ignores_tags(self):
        assert count_words("<p>one <strong>two</strong></p><p>three</p>") == 3

    def test_empty(self):
        assert count_words("") == 0
