"""HTML rendering of the tag cloud.

Each selected word becomes a span whose CSS class picks a font size between
MIN_FONT_SIZE and MAX_FONT_SIZE, growing by one for every
COUNT_PER_SIZE_STEP occurrences.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from python_pkg.tag_cloud.selector import RankedEntry

_logger = logging.getLogger(__name__)

MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 48
COUNT_PER_SIZE_STEP = 20

STYLESHEET_URL = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2"
    "/assignments/projects/tag-cloud-generator/data/tagcloud.css"
)


def font_size(count: int) -> int:
    """Map a word count to a font size class number."""
    size = MIN_FONT_SIZE + count // COUNT_PER_SIZE_STEP
    return max(MIN_FONT_SIZE, min(size, MAX_FONT_SIZE))


def displayable(text: str) -> str:
    """Replace undecodable characters so text can be written as UTF-8.

    File names that are not valid UTF-8 arrive as lone surrogates, which
    become Unicode replacement characters.
    """
    return text.encode("utf-8", "surrogatepass").decode("utf-8", "replace")


def make_title(n: int, source_name: str) -> str:
    """Build the page title, e.g. "Top 10 words in book.txt"."""
    return f"Top {n} words in {source_name}"


def iter_html_lines(
    entries: Sequence[RankedEntry],
    n: int,
    source_name: str,
) -> Iterator[str]:
    """Yield the lines of the tag cloud document, each ending in a newline.

    Args:
        entries: Words to show, in display order.
        n: Requested number of words, used in the title.
        source_name: Name of the input the words came from.
    """
    title = html.escape(make_title(n, displayable(source_name)))

    yield "<html>\n"
    yield "<head>\n"
    yield f"<title>{title}</title>\n"
    yield f'<link href="{STYLESHEET_URL}" rel="stylesheet" type="text/css">\n'
    yield "</head>\n"
    yield "<body>\n"
    yield f"<h2>{title}</h2>\n"
    yield "<hr>\n"
    yield '<div class="cdiv">\n'
    yield '<p class="cbox">\n'
    for entry in entries:
        word = html.escape(displayable(entry.word))
        yield (
            f'<span style="cursor:default" class="f{font_size(entry.count)}"'
            f' title="count: {entry.count}">{word}</span>\n'
        )
    yield "</p>\n"
    yield "</div>\n"
    yield "</body>\n"
    yield "</html>\n"


def render_html(entries: Sequence[RankedEntry], n: int, source_name: str) -> str:
    """Render the whole tag cloud document as a string."""
    return "".join(iter_html_lines(entries, n, source_name))


def write_html(
    filepath: str | Path,
    entries: Sequence[RankedEntry],
    n: int,
    source_name: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write the tag cloud document to a file, replacing any existing one.

    Lines are written as they are produced. If writing fails part way,
    whatever was already written stays in the file and the file is closed.

    Raises:
        OSError: If the file can't be opened or written.
    """
    path = Path(filepath)
    with path.open("w", encoding=encoding) as output_file:
        for line in iter_html_lines(entries, n, source_name):
            output_file.write(line)
    _logger.info("Wrote %d words to %s", len(entries), path)
