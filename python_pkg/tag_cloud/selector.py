"""Top-N word selection for the tag cloud."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Mapping

_logger = logging.getLogger(__name__)


class RankedEntry(NamedTuple):
    """A word with its total count in the input."""

    word: str
    count: int


def by_count(entry: RankedEntry) -> int:
    """Sort key: ascending count."""
    return entry.count


def alphabetical(entry: RankedEntry) -> str:
    """Sort key: word, case-insensitive."""
    return entry.word.casefold()


def select_top(word_counts: Mapping[str, int], n: int) -> list[RankedEntry]:
    """Select the n most frequent words, ordered alphabetically.

    Entries are sorted by ascending count and removed from the low end until
    at most n remain. Among words with equal counts at the cut-off, the ones
    seen earliest in the mapping are removed first.

    Args:
        word_counts: Mapping from word to its count.
        n: Maximum number of entries to keep.

    Returns:
        At most n entries sorted alphabetically, case-insensitive.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        msg = f"number of words must be non-negative, got {n}"
        raise ValueError(msg)

    entries = [RankedEntry(word, count) for word, count in word_counts.items()]
    entries.sort(key=by_count)
    kept = entries[max(len(entries) - n, 0) :]
    kept.sort(key=alphabetical)

    _logger.debug("Selected %d of %d distinct words", len(kept), len(entries))
    return kept
