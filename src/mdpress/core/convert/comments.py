"""HTML comments: park `<!-- ... -->` runs so later stages leave them verbatim"""

import logging
from typing import Optional

from mdpress.core.convert.stash import Stash


logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"


def _comment_end(lines: list[str], start: int) -> Optional[int]:
    """Index of the line closing the comment opened on lines[start], or None."""
    first = lines[start].strip()[len(COMMENT_OPEN):]
    if COMMENT_CLOSE in first:
        return start
    for i in range(start + 1, len(lines)):
        if COMMENT_CLOSE in lines[i]:
            return i
    return None


def convert_html_comments(lines: list[str], stash: Optional[Stash] = None) -> list[str]:
    """Collapse each comment that starts a line, through the line holding `-->`, into one line.

    With a stash the comment text is stored there and a placeholder line is
    emitted, so headings, lists and inline rules never see its interior. A
    comment that is never closed is left alone.
    """
    result: list[str] = []
    i = 0
    while i < len(lines):
        if not lines[i].strip().startswith(COMMENT_OPEN):
            result.append(lines[i])
            i += 1
            continue

        end = _comment_end(lines, i)
        if end is None:
            logger.debug("Unterminated HTML comment at line %d left as text", i + 1)
            result.append(lines[i])
            i += 1
            continue

        comment = "\n".join(lines[i:end + 1])
        result.append(stash.put(comment) if stash is not None else comment)
        i = end + 1
    return result
