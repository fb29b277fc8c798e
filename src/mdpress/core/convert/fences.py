"""Stage 1: fenced code blocks"""

import logging
import re
from typing import Optional

from mdpress.core.convert.stash import Stash
from mdpress.core.utils.html import escape


logger = logging.getLogger(__name__)

# Info string may carry more than the language ("```python title=x.py") but no backticks.
FENCE_OPEN_RE = re.compile(r"^(`{3,})([^`]*)$")
FENCE_CLOSE_RE = re.compile(r"^(`{3,})$")


def fence_language(info: str) -> str:
    """First word of a fence info string, or "" when it has none."""
    words = info.split()
    return words[0] if words else ""


def _closes(line: str, ticks: int) -> bool:
    m = FENCE_CLOSE_RE.match(line.strip())
    return bool(m) and len(m.group(1)) >= ticks


def render_code_block(code_lines: list[str], lang: str = "") -> str:
    """Render fence interior as a single-line <pre><code> element."""
    cls = f' class="language-{escape(lang)}"' if lang else ""
    code = escape("\n".join(code_lines)).replace("\n", "<br>")
    return f"<pre><code{cls}>{code}</code></pre>"


def convert_code_fences(lines: list[str], stash: Optional[Stash] = None) -> list[str]:
    """Replace each fenced block (three or more backticks) with one <pre><code> line.

    With a stash, the rendered block is stored there and a placeholder line
    is emitted instead, so no later stage can touch the code. A fence closes
    on a bare backtick line at least as long as its opener; one left open
    runs to the end of input.
    """
    result: list[str] = []
    i = 0
    while i < len(lines):
        m = FENCE_OPEN_RE.match(lines[i].strip())
        if not m:
            result.append(lines[i])
            i += 1
            continue

        ticks = len(m.group(1))
        lang = fence_language(m.group(2))
        code: list[str] = []
        i += 1
        while i < len(lines) and not _closes(lines[i], ticks):
            code.append(lines[i])
            i += 1
        if i >= len(lines):
            logger.debug("Unterminated code fence closed at end of input")
        i += 1  # skip the closing fence

        block = render_code_block(code, lang)
        result.append(stash.put(block) if stash is not None else block)
    return result
