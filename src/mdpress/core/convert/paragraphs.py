"""Stage 7: group leftover text lines into <p> elements"""

from mdpress.core.utils.html import is_block_html


LEADING_WS_ENTITIES = {
    " ": "&nbsp;",
    "\u3000": "&#12288;",
    "\t": "&nbsp;" * 4,
}


def preserve_leading_whitespace(line: str) -> str:
    """Swap leading spaces, full-width spaces and tabs for entities so browsers keep them."""
    stripped = line.lstrip(" \u3000\t")
    lead = line[:len(line) - len(stripped)]
    return "".join(LEADING_WS_ENTITIES[ch] for ch in lead) + stripped.rstrip()


def convert_paragraphs(lines: list[str]) -> list[str]:
    """Wrap runs of text lines in <p>, joining the lines with <br>.

    A run ends at a blank line or at a line already holding block markup;
    blank lines themselves are dropped.
    """
    result: list[str] = []
    paragraph: list[str] = []

    def _flush() -> None:
        if paragraph:
            result.append(f"<p>{'<br>'.join(paragraph)}</p>")
            paragraph.clear()

    for line in lines:
        if not line.strip():
            _flush()
        elif is_block_html(line):
            _flush()
            result.append(line)
        else:
            paragraph.append(preserve_leading_whitespace(line))
    _flush()
    return result
