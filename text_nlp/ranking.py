"""Orderings of a word frequency table for reporting.

Two independent orderings are produced from the same table:

- alphabetical: ascending by word, ties by descending count
- by occurrence: descending by count, ties by ascending word

Words are unique keys, so both orderings are total. The table is only
read; each ordering is a fresh list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedEntry:
    word: str
    count: int


def alphabetical_key(entry: RankedEntry) -> Tuple[str, int]:
    return (entry.word.lower(), -entry.count)


def occurrence_key(entry: RankedEntry) -> Tuple[int, str]:
    return (-entry.count, entry.word)


def to_entries(frequencies: Dict[str, int]) -> List[RankedEntry]:
    """Copy the items of `frequencies` into a list of RankedEntry."""
    return [RankedEntry(word, count) for word, count in frequencies.items()]


def order_alphabetically(frequencies: Dict[str, int]) -> List[RankedEntry]:
    """Return every entry of `frequencies` sorted by word."""
    return sorted(to_entries(frequencies), key=alphabetical_key)


def order_by_occurrence(frequencies: Dict[str, int]) -> List[RankedEntry]:
    """Return every entry of `frequencies` sorted by descending count."""
    return sorted(to_entries(frequencies), key=occurrence_key)


def rank(frequencies: Dict[str, int]) -> Tuple[List[RankedEntry], List[RankedEntry]]:
    """Return the alphabetical and by-occurrence orderings of `frequencies`."""
    alphabetical = order_alphabetically(frequencies)
    by_occurrence = order_by_occurrence(frequencies)
    logger.debug("Ranked %d entries", len(alphabetical))
    return alphabetical, by_occurrence
