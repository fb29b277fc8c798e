"""Block converter driver: run the ordered line stages over a Markdown body"""

import logging
from functools import partial
from typing import Callable

from mdpress.core.convert.blocks import convert_headings, convert_rules, convert_tables
from mdpress.core.convert.comments import convert_html_comments
from mdpress.core.convert.fences import convert_code_fences
from mdpress.core.convert.inline import convert_inline
from mdpress.core.convert.lists import convert_lists
from mdpress.core.convert.paragraphs import convert_paragraphs
from mdpress.core.convert.stash import Stash


logger = logging.getLogger(__name__)

Stage = Callable[[list[str]], list[str]]

FENCE_SENTINEL = "\ue000"

# Order matters: each stage sees the previous stage's full output.
STAGES: list[tuple[str, Stage]] = [
    ("rules",      convert_rules),
    ("headings",   convert_headings),
    ("tables",     convert_tables),
    ("lists",      convert_lists),
    ("inline",     convert_inline),
    ("paragraphs", convert_paragraphs),
]


def convert_body(body: str) -> str:
    """Convert a Markdown body (front matter already removed) to HTML.

    Code fences run first, then HTML comments. Both are parked in a stash
    behind `<pre>` placeholder lines, so nothing inside them is reinterpreted;
    they are put back after the last stage.
    """
    lines = body.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    code_blocks = Stash(FENCE_SENTINEL, wrap=("<pre>", "</pre>"))
    stages: list[tuple[str, Stage]] = [
        ("code fences", partial(convert_code_fences, stash=code_blocks)),
        ("html comments", partial(convert_html_comments, stash=code_blocks)),
        *STAGES,
    ]
    for name, stage in stages:
        lines = stage(lines)
        logger.debug("stage %s -> %d line(s)", name, len(lines))

    return code_blocks.restore("\n".join(lines))
