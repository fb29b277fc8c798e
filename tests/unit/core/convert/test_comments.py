"""Unit tests for core/convert/comments.py"""

from mdpress.core.convert.comments import convert_html_comments
from mdpress.core.convert.stash import Stash


def test_multiline_comment_collapses_to_one_line():
    lines = ["before", "<!--", "hidden **x**", "-->", "after"]
    assert convert_html_comments(lines) == ["before", "<!--\nhidden **x**\n-->", "after"]


def test_single_line_comment():
    assert convert_html_comments(["<!-- note -->", "text"]) == ["<!-- note -->", "text"]


def test_unterminated_comment_left_alone():
    lines = ["<!-- open", "# Heading"]
    assert convert_html_comments(lines) == lines


def test_comment_mid_line_is_not_collapsed():
    lines = ["text <!-- a", "b -->"]
    assert convert_html_comments(lines) == lines


def test_comment_with_stash_emits_placeholder():
    stash = Stash("\ue000", wrap=("<pre>", "</pre>"))
    out = convert_html_comments(["<!--", "- item", "-->"], stash=stash)
    assert len(out) == 1 and "item" not in out[0]
    assert stash.restore(out[0]) == "<!--\n- item\n-->"
