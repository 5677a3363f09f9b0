import pytest

from MarkdownRuns.inline_parser import parse_inline
from MarkdownRuns.model import Bold, Code, Image, Italic, Link, MarkdownElement, Text


def el(kind, content=""):
    return MarkdownElement(type=kind, content=content)


def test_bold_and_italic():
    assert parse_inline("This is **bold** text") == [el(Text(), "This is "), el(Bold(), "bold"), el(Text(), " text")]
    assert parse_inline("This is *italic* text") == [el(Text(), "This is "), el(Italic(), "italic"), el(Text(), " text")]


def test_underscore_markers():
    assert parse_inline("__b__ and _i_") == [el(Bold(), "b"), el(Text(), " and "), el(Italic(), "i")]


def test_markers_must_match_exactly():
    assert parse_inline("*a_") == [el(Text(), "*a_")]
    assert parse_inline("__a**") == [el(Text(), "__a**")]


def test_failed_double_marker_retries_as_single():
    assert parse_inline("**a*") == [el(Text(), "*"), el(Italic(), "a")]


def test_no_nested_markers_inside_emphasis():
    assert parse_inline("**a *b* `c`**") == [el(Bold(), "a *b* `c`")]


def test_empty_emphasis():
    assert parse_inline("****") == [el(Bold(), "")]


def test_inline_code():
    assert parse_inline("Use `print()` function") == [
        el(Text(), "Use "),
        el(Code(), "print()"),
        el(Text(), " function"),
    ]


def test_code_hides_other_markers():
    assert parse_inline("`*x*` [y](z)") == [el(Code(), "*x*"), el(Text(), " "), el(Link("y", "z"), "y")]


def test_unterminated_code_is_literal():
    assert parse_inline("a `b") == [el(Text(), "a `b")]


def test_link():
    assert parse_inline("Check [Google](https://google.com)") == [
        el(Text(), "Check "),
        el(Link(title="Google", url="https://google.com"), "Google"),
    ]


@pytest.mark.parametrize(
    "line",
    [
        "[T](U",
        "[T] (U)",
        "[T",
        "[",
        "]()",
    ],
)
def test_broken_links_are_literal(line):
    assert parse_inline(line) == [el(Text(), line)]


def test_image():
    assert parse_inline("see ![Logo](img/logo.png)!") == [
        el(Text(), "see "),
        el(Image(title="Logo", url="img/logo.png"), "Logo"),
        el(Text(), "!"),
    ]


def test_bang_without_bracket_is_literal():
    assert parse_inline("Wow! ![x](") == [el(Text(), "Wow! ![x](")]


def test_empty_link_parts():
    assert parse_inline("[]()") == [el(Link("", ""), "")]


def test_empty_line():
    assert parse_inline("") == []


def test_spans_use_offset_and_lineno():
    elements = parse_inline("a `b`", lineno=4, offset=3)
    assert [(e.span.lineno, e.span.col_offset, e.span.end_col_offset) for e in elements] == [(4, 3, 5), (4, 5, 8)]
