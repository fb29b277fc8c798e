"""Stage 5: nested bulleted/numbered lists as one explicit state machine

Each line is classified once and fed to `ListBuilder.feed`. The builder owns
a stack of `ListFrame`s whose levels strictly increase from bottom to top;
every frame it opens is closed again, at the latest by `finish()`.
"""

import logging
import re
from typing import Optional

from mdpress.core.convert.inline import render_inline
from mdpress.core.models import ListFrame, ListKind


logger = logging.getLogger(__name__)

# Only ASCII spaces and tabs count as list indentation; a full-width space
# in front of a bullet makes the line ordinary paragraph text.
ITEM_RE = re.compile(r"^([ \t]*)(?:([-+*])|(\d+)\.)[ \t]+(\S.*)$")


def indent_level(indent: str) -> int:
    """One level per tab, one per two spaces in each run of spaces (floor)."""
    level = 0
    spaces = 0
    for ch in indent:
        if ch == "\t":
            level += spaces // 2 + 1
            spaces = 0
        elif ch == " ":
            spaces += 1
    return level + spaces // 2


def parse_item(line: str) -> Optional[tuple[int, ListKind, Optional[int], str]]:
    """Return (level, kind, number, content) for a list item line, else None."""
    m = ITEM_RE.match(line)
    if not m:
        return None
    indent, bullet, number, content = m.groups()
    kind = ListKind.bulleted if bullet else ListKind.numbered
    return indent_level(indent), kind, int(number) if number else None, content.rstrip()


def is_list_item(line: str) -> bool:
    return ITEM_RE.match(line) is not None


class ListBuilder:
    """Rewrites a line sequence, replacing list item runs with <ul>/<ol> markup."""

    def __init__(self):
        self.out: list[str] = []
        self.stack: list[ListFrame] = []

    # --- output helpers ---

    def _close_item(self, frame: ListFrame) -> None:
        if frame.item_line is None:
            return
        if frame.item_line == len(self.out) - 1:
            self.out[-1] += "</li>"
        else:
            self.out.append("</li>")
        frame.item_line = None

    def _pop(self) -> None:
        frame = self.stack.pop()
        self._close_item(frame)
        self.out.append(f"</{frame.kind.value}>")

    def close_all(self) -> None:
        while self.stack:
            self._pop()

    # --- transitions ---

    def item(self, level: int, kind: ListKind, number: Optional[int], content: str) -> None:
        while self.stack and self.stack[-1].level > level:
            self._pop()

        top = self.stack[-1] if self.stack else None
        if top is not None and top.level == level and top.kind != kind:
            self._pop()
            top = self.stack[-1] if self.stack else None

        if top is not None and top.level == level:
            self._close_item(top)
            frame = top
        else:
            # Nested lists open inside the parent's still-open <li>.
            frame = ListFrame(kind=kind, level=level)
            self.stack.append(frame)
            self.out.append(f"<{kind.value}>")

        attrs = ""
        if kind == ListKind.numbered and number is not None:
            if number != frame.counter + 1:
                frame.explicit = True
            if frame.explicit:
                attrs = f' value="{number}"'
            frame.counter = number

        self.out.append(f"<li{attrs}>{render_inline(content)}")
        frame.item_line = len(self.out) - 1

    def feed(self, line: str, list_follows: bool = False) -> None:
        """Process one line; list_follows tells whether the next non-blank line is a list item."""
        parsed = parse_item(line)
        if parsed is not None:
            self.item(*parsed)
            return

        if not line.strip():
            if self.stack:
                if list_follows:
                    return
                self.close_all()
            self.out.append(line)
            return

        # Headings, tables, raw HTML and plain text all end the list.
        self.close_all()
        self.out.append(line)

    def finish(self) -> list[str]:
        if self.stack:
            logger.debug("Closing %d open list(s) at end of input", len(self.stack))
        self.close_all()
        return self.out


def convert_lists(lines: list[str]) -> list[str]:
    """Stage entry point: render every list in the line sequence."""
    # follows[i]: the first non-blank line after i is a list item
    follows = [False] * len(lines)
    nxt = False
    for i in range(len(lines) - 1, -1, -1):
        follows[i] = nxt
        if lines[i].strip():
            nxt = is_list_item(lines[i])

    builder = ListBuilder()
    for line, list_follows in zip(lines, follows):
        builder.feed(line, list_follows)
    return builder.finish()
