"""Tests for text_nlp.tokenizer module."""

from __future__ import annotations

import pytest

from text_nlp.tokenizer import (
    SEPARATORS,
    is_separator,
    iter_tokens,
    iter_words,
    next_word_or_separator,
)

LINES = [
    "the cat sat on the mat",
    "  leading and trailing  ",
    "hello, world! (again)",
    "123 !!! ---",
    "well-known state-of-the-art",
    "“quoted” — dashes… and ‘more’",
    "what? no separator for question marks",
    "x",
]


def test_next_word_or_separator_word():
    """Test reading a word from the start of a line."""
    assert next_word_or_separator("hello world", 0) == "hello"


def test_next_word_or_separator_separator_run():
    """Test reading a run of separators."""
    assert next_word_or_separator("hello, world", 5) == ", "


def test_next_word_or_separator_to_end_of_line():
    """Test that a run stops at the end of the line."""
    assert next_word_or_separator("hello world", 6) == "world"


def test_next_word_or_separator_digits_are_separators():
    """Test that digits split words."""
    assert next_word_or_separator("abc123def", 0) == "abc"
    assert next_word_or_separator("abc123def", 3) == "123"
    assert next_word_or_separator("abc123def", 6) == "def"


def test_next_word_or_separator_question_mark_is_word_char():
    """Test that characters outside the set stay inside words."""
    assert next_word_or_separator("what? yes", 0) == "what?"


def test_next_word_or_separator_custom_separators():
    """Test tokenization with a caller-supplied separator set."""
    assert next_word_or_separator("a|b c", 0, separators="|") == "a"
    assert next_word_or_separator("a|b c", 2, separators="|") == "b c"


@pytest.mark.parametrize("position", [-1, 5, 10])
def test_next_word_or_separator_out_of_range(position: int):
    """Test that an offset outside the text is rejected."""
    with pytest.raises(ValueError):
        next_word_or_separator("hello", position)


@pytest.mark.parametrize("line", LINES)
def test_next_word_or_separator_is_homogeneous_and_maximal(line: str):
    """Test the run contract at every offset of each line."""
    for position in range(len(line)):
        token = next_word_or_separator(line, position)
        end = position + len(token)

        assert token
        assert line[position:end] == token
        kinds = {is_separator(char) for char in token}
        assert len(kinds) == 1
        if end < len(line):
            assert is_separator(line[end]) != is_separator(token[0])


@pytest.mark.parametrize("line", LINES)
def test_iter_tokens_reassembles_line(line: str):
    """Test that tokens cover the line exactly, in order."""
    assert "".join(iter_tokens(line)) == line


def test_iter_tokens_alternates_kinds():
    """Test that consecutive tokens switch between word and separator."""
    tokens = list(iter_tokens("hello, world!"))

    assert tokens == ["hello", ", ", "world", "!"]


def test_iter_tokens_empty_line():
    """Test tokenizing an empty line."""
    assert list(iter_tokens("")) == []


def test_iter_words_skips_separators():
    """Test that only words are yielded."""
    words = list(iter_words("“quoted” — dashes… and ‘more’"))

    # ’ is not a separator, so it stays attached
    assert words == ["quoted", "dashes", "and", "more’"]


def test_iter_words_separators_only():
    """Test a line with no words."""
    assert list(iter_words("123 !!! ---")) == []


def test_separator_set_contents():
    """Test a few members and non-members of the separator set."""
    for char in " \t,.-!0123456789&…—–":
        assert char in SEPARATORS
    for char in "a?’<>_":
        assert char not in SEPARATORS
