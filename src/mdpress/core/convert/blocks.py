"""Stages 2-4: horizontal rules, headings, and pipe tables"""

import logging
import re

from mdpress.core.convert.lists import is_list_item
from mdpress.core.utils.html import is_block_html


logger = logging.getLogger(__name__)

RULE_RE = re.compile(r"^\s*(?:---|___|\*\*\*)\s*$")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
SEPARATOR_RE = re.compile(r"^[\s|:-]+$")


def convert_rules(lines: list[str]) -> list[str]:
    """Turn a line of exactly ---, ___ or *** (whitespace allowed) into <hr>."""
    return ["<hr>" if RULE_RE.match(line) else line for line in lines]


def convert_headings(lines: list[str]) -> list[str]:
    """Turn `#`-prefixed lines into <h1>..<h6>."""
    result = []
    for line in lines:
        m = HEADING_RE.match(line)
        if m:
            level = len(m.group(1))
            line = f"<h{level}>{m.group(2).strip()}</h{level}>"
        result.append(line)
    return result


def is_table_row(line: str) -> bool:
    """A line with a pipe that is neither block markup nor a list item."""
    return "|" in line and not is_block_html(line) and not is_list_item(line)


def is_separator_row(line: str) -> bool:
    """Header/body separator such as |---|:--:|."""
    return "|" in line and "-" in line and bool(SEPARATOR_RE.match(line))


def split_row(line: str) -> list[str]:
    """Drop one optional leading and trailing pipe, split on the rest, trim cells."""
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def convert_tables(lines: list[str]) -> list[str]:
    """Render each maximal run of table rows as a <table>.

    The first row of a run is the header; separator rows are consumed
    without output wherever they appear.
    """
    result: list[str] = []
    in_table = False
    header_done = False
    body_open = False

    def _close() -> None:
        if body_open:
            result.append("</tbody>")
        result.append("</table>")

    for line in lines:
        if not is_table_row(line):
            if in_table:
                _close()
                in_table = header_done = body_open = False
            result.append(line)
            continue

        if is_separator_row(line):
            continue

        if not in_table:
            result.append("<table>")
            in_table = True

        cells = split_row(line)
        if not header_done:
            result.append("<thead>")
            result.append("<tr>" + "".join(f"<th>{c}</th>" for c in cells) + "</tr>")
            result.append("</thead>")
            header_done = True
        else:
            if not body_open:
                result.append("<tbody>")
                body_open = True
            result.append("<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>")

    if in_table:
        logger.debug("Table closed at end of input")
        _close()
    return result
