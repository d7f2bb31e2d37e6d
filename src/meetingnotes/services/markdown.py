"""Minimal markdown-to-HTML rendering for generated summaries.

Handles the subset the model produces: ``#``-``###`` headings, bold and
italic emphasis, ``-``/``*`` bullet lists, numbered lists and paragraphs.
Input is HTML-escaped before any markup is added, so model output cannot
inject tags into the editor.
"""

import html
import re

_HEADING = re.compile(r"^(#{1,3}) (.*)$")
_BULLET = re.compile(r"^[-*]\s+(.*)$")
_NUMBERED = re.compile(r"^\d+\.\s+(.*)$")
_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")
_TAG = re.compile(r"<[^>]*>")


def _inline(text: str) -> str:
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return _ITALIC.sub(r"<em>\1</em>", text)


def markdown_to_html(text: str) -> str:
    """Convert markdown-flavored text to an HTML fragment."""
    if not text or not text.strip():
        return ""

    blocks: list[str] = []
    paragraph: list[str] = []
    items: list[str] = []
    list_tag = ""

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append("<p>" + "<br>".join(paragraph) + "</p>")
            paragraph.clear()

    def flush_list() -> None:
        nonlocal list_tag
        if items:
            body = "".join(f"<li>{item}</li>" for item in items)
            blocks.append(f"<{list_tag}>{body}</{list_tag}>")
            items.clear()
        list_tag = ""

    for line in html.escape(text).splitlines():
        line = line.rstrip()
        if not line.strip():
            flush_paragraph()
            flush_list()
            continue

        heading = _HEADING.match(line)
        if heading:
            flush_paragraph()
            flush_list()
            level = len(heading.group(1))
            blocks.append(f"<h{level}>{_inline(heading.group(2))}</h{level}>")
            continue

        bullet = _BULLET.match(line)
        numbered = None if bullet else _NUMBERED.match(line)
        if bullet or numbered:
            flush_paragraph()
            tag = "ul" if bullet else "ol"
            if tag != list_tag:
                flush_list()
                list_tag = tag
            items.append(_inline((bullet or numbered).group(1)))
            continue

        flush_list()
        paragraph.append(_inline(line.strip()))

    flush_paragraph()
    flush_list()
    return "".join(blocks)


def count_words(text: str) -> int:
    """Count words in plain text or an HTML fragment, ignoring tags."""
    plain = html.unescape(_TAG.sub(" ", text or ""))
    return len(plain.split())
