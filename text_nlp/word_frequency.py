"""Word frequency counting over lines of text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

from common.file_helpers import file_manager, iter_lines
from text_nlp.tokenizer import SEPARATORS, iter_words

logger = logging.getLogger(__name__)


def count_words(lines: Iterable[str], separators: str = SEPARATORS) -> Dict[str, int]:
    """Return a frequency dictionary of the words in `lines`.

    Each line is lower-cased and tokenized on its own, so a word broken
    across a line break counts as two words.
    """
    frequencies: Dict[str, int] = {}
    for line in lines:
        for word in iter_words(line.lower(), separators):
            if word in frequencies:
                frequencies[word] += 1
            else:
                frequencies[word] = 1
    return frequencies


def count_words_in_file(
    path: Union[str, Path],
    encoding: str = "utf-8",
    separators: str = SEPARATORS,
) -> Dict[str, int]:
    """Read `path` line by line and return its word frequencies."""
    with file_manager(path, mode="r", encoding=encoding) as f:
        frequencies = count_words(iter_lines(f), separators)
    logger.debug(
        "Counted %d words (%d unique) in %s",
        total_words(frequencies),
        len(frequencies),
        path,
    )
    return frequencies


def total_words(frequencies: Dict[str, int]) -> int:
    """Return the number of word occurrences recorded in `frequencies`."""
    return sum(frequencies.values())
