"""Tokenizer and word counter for the tag cloud generator.

Text is split into maximal runs of either separator characters or word
characters. Word runs are lowercased and counted; separator runs are dropped.

Example:
    >>> list(iter_runs("Hi, there"))
    ['Hi', ', ', 'there']
    >>> count_words(["the cat, the hat"])
    Counter({'the': 2, 'cat': 1, 'hat': 1})
"""

from __future__ import annotations

from collections import Counter
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_logger = logging.getLogger(__name__)

SEPARATORS = frozenset(" \t\n\r,-.!?[]';:/()_*`")


def is_separator(char: str) -> bool:
    """Return True if char delimits words."""
    return char in SEPARATORS


def next_word_or_separator(text: str, position: int) -> str:
    """Return the maximal run starting at position.

    The run is either all separator characters or all word characters,
    depending on the classification of text[position].

    Args:
        text: Text to scan.
        position: Index where the run starts.

    Returns:
        The run text[position:end].

    Raises:
        ValueError: If position is outside the text.
    """
    if not 0 <= position < len(text):
        msg = f"position {position} out of range for text of length {len(text)}"
        raise ValueError(msg)

    separator_run = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == separator_run:
        end += 1
    return text[position:end]


def iter_runs(text: str) -> Iterator[str]:
    """Yield word and separator runs covering text left to right."""
    position = 0
    while position < len(text):
        run = next_word_or_separator(text, position)
        yield run
        position += len(run)


def iter_words(text: str) -> Iterator[str]:
    """Yield the lowercased word runs of text."""
    for run in iter_runs(text):
        if not is_separator(run[0]):
            yield run.lower()


def count_words(
    lines: Iterable[str],
    counts: Counter[str] | None = None,
) -> Counter[str]:
    """Count words in an iterable of text chunks.

    Args:
        lines: Text chunks, usually lines of a file. A word never spans
            two chunks.
        counts: Existing counter to keep accumulating into.

    Returns:
        Counter mapping lowercase word to number of occurrences.
    """
    if counts is None:
        counts = Counter()
    for line in lines:
        for word in iter_words(line):
            counts[word] += 1
    return counts


def count_words_in_file(
    filepath: str | Path,
    *,
    encoding: str = "utf-8",
) -> Counter[str]:
    """Read a text file line by line and count its words.

    Args:
        filepath: Path to the input file.
        encoding: Text encoding of the file.

    Returns:
        Counter mapping lowercase word to number of occurrences.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be opened or read.
        UnicodeDecodeError: If the file can't be decoded.
    """
    path = Path(filepath)
    with path.open(encoding=encoding) as input_file:
        counts = count_words(input_file)
    _logger.info(
        "Counted %d words (%d distinct) in %s",
        sum(counts.values()),
        len(counts),
        path,
    )
    return counts
