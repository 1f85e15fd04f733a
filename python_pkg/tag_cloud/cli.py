#!/usr/bin/env python3
"""Tag cloud generator - renders the most frequent words of a text as HTML.

Usage:
    # All parameters on the command line
    python -m python_pkg.tag_cloud --input book.txt --output cloud.html --top 50

    # Missing parameters are asked for interactively
    python -m python_pkg.tag_cloud
    python -m python_pkg.tag_cloud --input book.txt

    # Non-UTF-8 input
    python -m python_pkg.tag_cloud -i book.txt -o cloud.html -n 50 --encoding latin-1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.renderer import displayable, write_html
from python_pkg.tag_cloud.selector import select_top
from python_pkg.tag_cloud.tokenizer import count_words_in_file

if TYPE_CHECKING:
    from collections.abc import Sequence

_logger = logging.getLogger(__name__)

INPUT_PROMPT = "Please enter the name of the input file."
OUTPUT_PROMPT = "Please enter the name of the output file."
TOP_PROMPT = "Please enter the number of words included in tag cloud."


def parse_word_limit(text: str) -> int:
    """Parse the number of words to include in the tag cloud.

    Args:
        text: User supplied value, surrounding whitespace is ignored.

    Returns:
        The parsed non-negative integer.

    Raises:
        ValueError: If text is not a non-negative base-10 integer.
    """
    value = text.strip()
    if not value.isdigit() or not value.isascii():
        msg = f"Input was not a non-negative integer: {text!r}"
        raise ValueError(msg)
    return int(value)


def prompt(message: str) -> str:
    """Print message and read one line from stdin.

    Raises:
        EOFError: If stdin is exhausted.
    """
    sys.stdout.write(f"{message}\n")
    sys.stdout.flush()
    return input()


def _fail(message: str) -> int:
    sys.stderr.write(f"Error: {message}\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the tag cloud generator.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--input",
        "-i",
        type=str,
        help="Path to the text file to analyze (prompted for if omitted)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Path of the HTML file to write (prompted for if omitted)",
    )
    parser.add_argument(
        "--top",
        "-n",
        type=str,
        help="Number of words included in the tag cloud (prompted for if omitted)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default="utf-8",
        help="Encoding of the input file (default: utf-8)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        input_path = args.input if args.input is not None else prompt(INPUT_PROMPT)
        output_path = args.output if args.output is not None else prompt(OUTPUT_PROMPT)
        top_text = args.top if args.top is not None else prompt(TOP_PROMPT)
    except EOFError:
        _logger.warning("Standard input closed while prompting")
        return _fail("Could not read line from console.")

    try:
        n = parse_word_limit(top_text)
    except ValueError as e:
        return _fail(str(e))

    input_name = displayable(input_path)
    output_name = displayable(output_path)

    try:
        word_counts = count_words_in_file(input_path, encoding=args.encoding)
    except FileNotFoundError:
        _logger.warning("Input file %s not found", input_name)
        return _fail(f"File not found - {input_name}")
    except UnicodeDecodeError as e:
        _logger.warning("Decoding %s as %s failed", input_name, args.encoding)
        return _fail(f"Could not decode {input_name} as {args.encoding} - {e}")
    except LookupError as e:
        _logger.warning("Unknown encoding %s", args.encoding)
        return _fail(str(e))
    except (OSError, ValueError) as e:
        _logger.warning("Reading %s failed", input_name)
        return _fail(f"Error reading from file {input_name} - {displayable(str(e))}")

    entries = select_top(word_counts, n)

    try:
        write_html(output_path, entries, n, input_path)
    except (OSError, ValueError) as e:
        _logger.warning("Writing %s failed", output_name)
        return _fail(f"Error writing output file {output_name} - {displayable(str(e))}")

    sys.stdout.write(f"Tag cloud written to {output_name}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
