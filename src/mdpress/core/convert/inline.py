"""Stage 6: inline spans (code, images, links, bold, strikethrough)"""

import re

from mdpress.core.convert.stash import Stash
from mdpress.core.utils.html import escape


INLINE_SENTINEL = "\ue001"

CODE_SPAN_RE = re.compile(r"`([^`\n]+)`")
CODE_ELEMENT_RE = re.compile(r"<code\b[^>]*>.*?</code>")
TAG_RE = re.compile(r"</?[A-Za-z][^<>]*>")
IMAGE_RE = re.compile(r"!\[([^\]\n]*)\]\(([^)\n]+)\)")
LINK_RE = re.compile(r"\[([^\]\n]+)\]\(([^)\n]+)\)")
BOLD_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
BOLD_UNDERSCORE_RE = re.compile(r"__(.+?)__")
STRIKE_RE = re.compile(r"~~(.+?)~~")


def render_inline(text: str) -> str:
    """Apply inline markup to text.

    Code spans are rendered and stashed before anything else, so markers
    inside backticks stay literal. Markup already present (tags, <code>
    elements) is stashed too, which makes a second pass over rendered text
    a no-op.
    """
    stash = Stash(INLINE_SENTINEL)

    text = CODE_SPAN_RE.sub(lambda m: stash.put(f"<code>{escape(m.group(1))}</code>"), text)
    text = CODE_ELEMENT_RE.sub(lambda m: stash.put(m.group(0)), text)
    text = TAG_RE.sub(lambda m: stash.put(m.group(0)), text)

    text = IMAGE_RE.sub(lambda m: stash.put(f'<img src="{m.group(2)}" alt="{m.group(1)}">'), text)
    text = LINK_RE.sub(lambda m: stash.put(f'<a href="{m.group(2)}">') + m.group(1) + stash.put("</a>"), text)

    text = BOLD_STAR_RE.sub(r"<strong>\1</strong>", text)
    text = BOLD_UNDERSCORE_RE.sub(r"<strong>\1</strong>", text)
    text = STRIKE_RE.sub(r"<del>\1</del>", text)

    return stash.restore(text)


def convert_inline(lines: list[str]) -> list[str]:
    """Stage entry point: render inline spans on every line."""
    return [render_inline(line) for line in lines]
