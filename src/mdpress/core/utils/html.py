"""HTML helpers: escaping and recognising lines that already hold block markup"""

import html
import re


# Tags the converter itself emits at the start of a line.
BLOCK_TAGS = frozenset({
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li",
    "table", "thead", "tbody", "tr", "th", "td",
    "pre", "hr", "p",
})

# Inline tags never end a paragraph, even when a line starts with one.
INLINE_TAGS = frozenset({
    "a", "abbr", "b", "br", "cite", "code", "del", "em", "i", "img", "kbd",
    "mark", "q", "s", "small", "span", "strong", "sub", "sup", "u",
})

LEADING_TAG_RE = re.compile(r"^<(/?)([A-Za-z][A-Za-z0-9]*)")
RAW_HTML_RE = re.compile(r"^</?[A-Za-z][^>]*>")


def escape(text: str) -> str:
    """Escape &, <, >, and both quote characters."""
    return html.escape(text, quote=True)


def leading_tag(line: str) -> str | None:
    """Return the lowercased name of the tag a line starts with, if any."""
    m = LEADING_TAG_RE.match(line.strip())
    return m.group(2).lower() if m else None


def is_block_html(line: str) -> bool:
    """True for lines the converter (or the author, as raw HTML) laid out as block markup.

    Known block tags are checked first; any other tag-shaped line counts as
    embedded HTML unless it opens with an inline element.
    """
    stripped = line.strip()
    tag = leading_tag(stripped)
    if tag is None:
        return stripped.startswith("<!--")
    if tag in BLOCK_TAGS:
        return True
    return tag not in INLINE_TAGS and bool(RAW_HTML_RE.match(stripped))
