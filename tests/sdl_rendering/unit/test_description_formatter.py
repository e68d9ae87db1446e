"""Description formatter tests."""

from __future__ import annotations

from graphql_schema_docs.sdl_rendering.description_formatter import (
    DEFAULT_DESCRIPTION_WIDTH,
    WrappedDescription,
)


def test_absent_or_blank_description_yields_no_lines() -> None:
    assert list(WrappedDescription(None)) == []
    assert list(WrappedDescription("")) == []
    assert list(WrappedDescription("   \n  ")) == []


def test_wraps_greedily_at_default_width() -> None:
    text = " ".join(["word"] * 30)

    lines = list(WrappedDescription(text))

    assert DEFAULT_DESCRIPTION_WIDTH == 80
    assert lines == [" ".join(["word"] * 16), " ".join(["word"] * 14)]
    assert all(len(line) <= 80 for line in lines)


def test_overlong_word_keeps_its_own_line() -> None:
    long_word = "x" * 100

    assert list(WrappedDescription(f"a {long_word} b")) == ["a", long_word, "b"]


def test_hyphenated_words_are_not_split() -> None:
    text = "alpha-beta-gamma-delta"

    assert list(WrappedDescription(text, width=10)) == [text]


def test_existing_line_breaks_are_kept() -> None:
    assert list(WrappedDescription("First line.\n\nSecond line.")) == [
        "First line.",
        "",
        "Second line.",
    ]


def test_iteration_restarts() -> None:
    description = WrappedDescription("one two three", width=7)

    assert list(description) == ["one two", "three"]
    assert list(description) == ["one two", "three"]
