"""Shared fixtures for core unit tests"""

import re

import pytest


SAMPLE_FM_MD = """\
---
title: Hello
categories: [a, b]
---
# Heading

- item1
- item2
  - nested
"""

SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("**hello**")
```

---

| a | b |
|---|---|
| 1 | 2 |

Footer paragraph.
"""

_TAG_RE = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)[^>]*?(/?)>")
_VOID_TAGS = {"br", "hr", "img"}


def check_nesting(html: str) -> list[str]:
    """Stack-based validator: return the tags left open, raising on a mismatched close."""
    stack: list[str] = []
    for closing, name, self_closing in _TAG_RE.findall(html):
        name = name.lower()
        if name in _VOID_TAGS or self_closing:
            continue
        if closing:
            assert stack and stack[-1] == name, f"unexpected </{name}>; open: {stack}"
            stack.pop()
        else:
            stack.append(name)
    return stack


@pytest.fixture(name="well_nested")
def well_nested_fixture():
    """Assert that every opened tag in html is closed in order."""
    def _check(html: str) -> None:
        assert check_nesting(html) == [], f"unclosed tags in:\n{html}"
    return _check


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
