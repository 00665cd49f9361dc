from __future__ import annotations

from vin.syntax import (
    C_PROFILE,
    PYTHON_PROFILE,
    Highlight,
    Keyword,
    SyntaxProfile,
    highlight,
    is_separator,
    select_profile,
    syntax_to_color,
)


def classes(text: str, profile: SyntaxProfile | None = C_PROFILE) -> list[Highlight]:
    return highlight(text, profile)


def test_c_statement_scenario() -> None:
    text = "int x = 1; // c"
    hl = classes(text)

    assert len(hl) == len(text)
    assert hl[0:3] == [Highlight.KEYWORD1] * 3
    assert hl[text.index("1")] == Highlight.NUMBER
    start = text.index("//")
    assert hl[start:] == [Highlight.COMMENT] * (len(text) - start)
    assert hl[text.index("x")] == Highlight.NORMAL


def test_secondary_keywords_use_keyword2() -> None:
    hl = classes("return x;")

    assert hl[0:6] == [Highlight.KEYWORD2] * 6
    assert hl[7] == Highlight.NORMAL


def test_keyword_requires_separators_on_both_sides() -> None:
    assert classes("integer")[0:3] == [Highlight.NORMAL] * 3
    assert classes("xint y")[1:4] == [Highlight.NORMAL] * 3
    assert classes("(int)")[1:4] == [Highlight.KEYWORD1] * 3


def test_strings_and_escapes() -> None:
    text = 'a = "x\\"y"; b'
    hl = classes(text)

    start = text.index('"')
    end = text.rindex('"')
    assert hl[start : end + 1] == [Highlight.STRING] * (end + 1 - start)
    assert hl[end + 1] == Highlight.NORMAL
    assert hl[-1] == Highlight.NORMAL


def test_single_quote_closes_only_on_matching_quote() -> None:
    text = "'a\"b' c"
    hl = classes(text)

    assert hl[0:5] == [Highlight.STRING] * 5
    assert hl[6] == Highlight.NORMAL


def test_comment_marker_inside_string_is_text() -> None:
    text = '"//" x'
    hl = classes(text)

    assert hl[0:4] == [Highlight.STRING] * 4
    assert hl[5] == Highlight.NORMAL


def test_numbers_need_separator_or_number_before() -> None:
    hl = classes("x1 12.5 a.5")

    assert hl[1] == Highlight.NORMAL
    assert hl[3:7] == [Highlight.NUMBER] * 4
    assert hl[9] == Highlight.NORMAL
    assert hl[10] == Highlight.NUMBER


def test_no_profile_is_all_normal() -> None:
    text = "int x = 1; // c"

    assert highlight(text, None) == [Highlight.NORMAL] * len(text)


def test_highlight_is_idempotent() -> None:
    text = 'for (int i = 0; i < 10; i++) { puts("hi"); }'

    assert highlight(text, C_PROFILE) == highlight(text, C_PROFILE)


def test_python_profile_comment_and_keywords() -> None:
    text = "def f(self): # note"
    hl = highlight(text, PYTHON_PROFILE)

    assert hl[0:3] == [Highlight.KEYWORD1] * 3
    assert hl[6:10] == [Highlight.KEYWORD2] * 4
    assert hl[text.index("#") :] == [Highlight.COMMENT] * len("# note")


def test_keyword_parse_marker() -> None:
    assert Keyword.parse("int|") == Keyword("int", secondary=True)
    assert Keyword.parse("int") == Keyword("int")


def test_profile_keywords_sorted_longest_first() -> None:
    profile = SyntaxProfile.build("t", filematch=(".t",), keywords=("in", "int|", "i"))

    assert [keyword.text for keyword in profile.keywords] == ["int", "in", "i"]


def test_select_profile_by_extension_and_substring() -> None:
    substring = SyntaxProfile.build("make", filematch=("Makefile",))

    assert select_profile("main.c") is C_PROFILE
    assert select_profile("src/app.py") is PYTHON_PROFILE
    assert select_profile("notes.txt") is None
    assert select_profile("main.cc") is None
    assert select_profile(None) is None
    assert select_profile("build/Makefile", (substring,)) is substring


def test_separators_and_colors() -> None:
    assert is_separator(" ")
    assert is_separator("\0")
    assert is_separator(";")
    assert not is_separator("_")
    assert syntax_to_color(Highlight.COMMENT) == 90
    assert syntax_to_color(Highlight.KEYWORD1) == 94
    assert syntax_to_color(Highlight.KEYWORD2) == 91
    assert syntax_to_color(Highlight.NUMBER) == 36
    assert syntax_to_color(Highlight.NORMAL) == 37
