"""Placeholder stash that shields rendered fragments from later regex passes"""

import re


class Stash:
    """Swap fragments out for opaque tokens, then swap them back.

    Tokens are private-use code points around an index, optionally wrapped
    (e.g. in `<pre>...</pre>` so the token line still reads as block markup).
    """

    def __init__(self, sentinel: str, wrap: tuple[str, str] = ("", "")):
        self.sentinel = sentinel
        self.wrap = wrap
        self.items: list[str] = []
        self._token_re = re.compile(
            re.escape(wrap[0]) + re.escape(sentinel) + r"(\d+)" + re.escape(sentinel) + re.escape(wrap[1])
        )

    def __len__(self) -> int:
        return len(self.items)

    def put(self, fragment: str) -> str:
        """Store fragment and return its token. Tokens inside fragment are resolved first."""
        self.items.append(self.restore(fragment))
        return f"{self.wrap[0]}{self.sentinel}{len(self.items) - 1}{self.sentinel}{self.wrap[1]}"

    def restore(self, text: str) -> str:
        """Replace every known token in text with its fragment."""
        if not self.items or self.sentinel not in text:
            return text

        def _sub(m: re.Match) -> str:
            idx = int(m.group(1))
            return self.items[idx] if idx < len(self.items) else m.group(0)

        return self._token_re.sub(_sub, text)
