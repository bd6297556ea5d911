"""Word/separator tokenizer over a fixed separator set.

A line is split into maximal runs that are either made entirely of
separator characters or entirely of other characters. Only the latter
are words; separator runs are kept by `iter_tokens` so that the tokens
of a line always concatenate back to the line itself.
"""

from __future__ import annotations

from typing import Iterator

SEPARATORS = " \t\n\r,-.![];:/()\"”“`'*1234567890‘–&—…"


def is_separator(char: str, separators: str = SEPARATORS) -> bool:
    """Return True if `char` belongs to `separators`."""
    return char in separators


def next_word_or_separator(text: str, position: int, separators: str = SEPARATORS) -> str:
    """Return the word or separator run of `text` starting at `position`.

    The result is the longest substring beginning at `position` whose
    characters all fall in the same category (separator or not) as
    `text[position]`.

    Args:
        text: Line to read from
        position: Starting index, 0 <= position < len(text)
        separators: Characters that delimit words

    Returns:
        Non-empty, maximal, homogeneous run starting at `position`

    Raises:
        ValueError: If `position` is outside `text`
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} out of range for text of length {len(text)}")

    in_separator = is_separator(text[position], separators)
    end = position + 1
    while end < len(text) and is_separator(text[end], separators) == in_separator:
        end += 1
    return text[position:end]


def iter_tokens(line: str, separators: str = SEPARATORS) -> Iterator[str]:
    """Yield every word and separator run of `line` in order."""
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        yield token
        position += len(token)


def iter_words(line: str, separators: str = SEPARATORS) -> Iterator[str]:
    """Yield only the words of `line`, skipping separator runs."""
    for token in iter_tokens(line, separators):
        if not is_separator(token[0], separators):
            yield token
