"""Unit tests for core/convert/lists.py"""

import pytest

from mdpress.core.convert.lists import convert_lists, indent_level, parse_item
from mdpress.core.models import ListKind


@pytest.mark.parametrize("indent,expected", [
    ("", 0),
    (" ", 0),
    ("  ", 1),
    ("   ", 1),
    ("    ", 2),
    ("\t", 1),
    ("\t\t", 2),
    ("  \t", 2),
])
def test_indent_level(indent, expected):
    """Tabs count one level each; spaces one level per two, floored."""
    assert indent_level(indent) == expected


@pytest.mark.parametrize("line,expected", [
    ("- a", (0, ListKind.bulleted, None, "a")),
    ("+ a", (0, ListKind.bulleted, None, "a")),
    ("* a  ", (0, ListKind.bulleted, None, "a")),
    ("  12. b", (1, ListKind.numbered, 12, "b")),
])
def test_parse_item(line, expected):
    assert parse_item(line) == expected


@pytest.mark.parametrize("line", ["-a", "- ", "1.5 million", "**bold**", "\u3000- wide", "text"])
def test_not_list_items(line):
    """Missing whitespace or content, or a full-width indent, is not a list item."""
    assert parse_item(line) is None


def test_flat_bulleted_list():
    assert convert_lists(["- a", "- b"]) == ["<ul>", "<li>a</li>", "<li>b</li>", "</ul>"]


def test_nested_list_opens_inside_parent_item():
    """A deeper item opens a new list inside the still-open parent <li>."""
    assert convert_lists(["- item1", "- item2", "  - nested"]) == [
        "<ul>",
        "<li>item1</li>",
        "<li>item2",
        "<ul>",
        "<li>nested</li>",
        "</ul>",
        "</li>",
        "</ul>",
    ]


def test_dedent_closes_deeper_list():
    assert convert_lists(["- a", "  - b", "- c"]) == [
        "<ul>", "<li>a", "<ul>", "<li>b</li>", "</ul>", "</li>", "<li>c</li>", "</ul>",
    ]


def test_dedent_to_intermediate_level_opens_new_list():
    """Returning to a level with no open frame starts a list there."""
    assert convert_lists(["- a", "    - b", "  - c"]) == [
        "<ul>", "<li>a",
        "<ul>", "<li>b</li>", "</ul>",
        "<ul>", "<li>c</li>", "</ul>",
        "</li>", "</ul>",
    ]


def test_kind_switch_at_same_level_starts_new_list():
    assert convert_lists(["- a", "1. b"]) == [
        "<ul>", "<li>a</li>", "</ul>", "<ol>", "<li>b</li>", "</ol>",
    ]


def test_sequential_numbers_auto_increment():
    assert convert_lists(["1. a", "2. b"]) == ["<ol>", "<li>a</li>", "<li>b</li>", "</ol>"]


def test_skipped_number_switches_to_explicit_values():
    """Once numbering skips, this and every later item carries value=""."""
    assert convert_lists(["1. a", "3. b", "4. c"]) == [
        "<ol>", "<li>a</li>", '<li value="3">b</li>', '<li value="4">c</li>', "</ol>",
    ]


def test_list_starting_above_one_is_explicit():
    assert convert_lists(["5. a", "6. b"]) == [
        "<ol>", '<li value="5">a</li>', '<li value="6">b</li>', "</ol>",
    ]


def test_blank_line_between_items_is_absorbed():
    assert convert_lists(["- a", "", "", "- b"]) == ["<ul>", "<li>a</li>", "<li>b</li>", "</ul>"]


def test_blank_line_before_text_ends_list():
    """The blank line is kept so paragraphs can use it as a boundary."""
    assert convert_lists(["- a", "", "text"]) == ["<ul>", "<li>a</li>", "</ul>", "", "text"]


def test_plain_line_ends_list():
    assert convert_lists(["- a", "text"]) == ["<ul>", "<li>a</li>", "</ul>", "text"]


def test_heading_ends_nested_lists():
    out = convert_lists(["- a", "  - b", "<h2>x</h2>"])
    assert out == ["<ul>", "<li>a", "<ul>", "<li>b</li>", "</ul>", "</li>", "</ul>", "<h2>x</h2>"]


def test_one_space_indent_stays_at_same_level():
    assert convert_lists(["- a", " - b"]) == ["<ul>", "<li>a</li>", "<li>b</li>", "</ul>"]


def test_tab_indent_nests():
    assert convert_lists(["- a", "\t- b"])[2:4] == ["<ul>", "<li>b</li>"]


def test_full_width_indent_is_not_nesting():
    """A full-width space before a bullet leaves the line as text and ends the list."""
    assert convert_lists(["- a", "\u3000- b"]) == ["<ul>", "<li>a</li>", "</ul>", "\u3000- b"]


def test_item_content_gets_inline_markup():
    assert convert_lists(["- **b** `c`"]) == ["<ul>", "<li><strong>b</strong> <code>c</code></li>", "</ul>"]


def test_all_frames_closed_at_end_of_input(well_nested):
    out = convert_lists(["- a", "  - b", "    1. c", "      - d"])
    assert out.count("<ul>") == out.count("</ul>") == 3
    assert out.count("<ol>") == out.count("</ol>") == 1
    well_nested("\n".join(out))


def test_lines_outside_lists_untouched():
    lines = ["para", "", "<h1>x</h1>"]
    assert convert_lists(lines) == lines
