#!/usr/bin/env python3
"""Text analytics command line tool.

Usage:
    # From raw text
    python -m text_analytics.cli --text "Ala ma kota. Kot ma Ale!"

    # From a file (input.txt or $TEXT_ANALYTICS_INPUT_FILE when no path is given)
    python -m text_analytics.cli --file path/to/file.txt

    # From multiple files
    python -m text_analytics.cli --files file1.txt file2.txt

    # From Project Gutenberg books analyzed together, without licence headers and footers
    python -m text_analytics.cli --strip-gutenberg --url \
        https://www.gutenberg.org/files/84/84-0.txt https://www.gutenberg.org/files/11/11-0.txt

    # Append the 20 most frequent words, save the report as JSON
    python -m text_analytics.cli --file text.txt --top 20 --json --output results.json

    # Without a source, text is read from stdin until an empty line
    python -m text_analytics.cli
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING

from text_analytics.analyzer import analyze, analyze_text, most_common_words
from text_analytics.report import (
    format_statistics,
    format_word_frequencies,
    statistics_to_json,
)
from text_analytics.sources import (
    default_input_file,
    fetch_urls,
    read_console,
    read_file,
    read_files,
    strip_gutenberg_boilerplate,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

_logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        msg = f"must be zero or greater, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute character, word and sentence statistics for text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "--text",
        "-t",
        type=str,
        help="Raw text to analyze",
    )
    input_group.add_argument(
        "--file",
        "-f",
        nargs="?",
        const="",
        metavar="PATH",
        help="File to analyze (default: input.txt)",
    )
    input_group.add_argument(
        "--files",
        "-F",
        nargs="+",
        type=str,
        help="Paths to multiple files to analyze",
    )
    input_group.add_argument(
        "--url",
        "-u",
        nargs="+",
        type=str,
        help="URLs of plain-text documents to download and analyze together",
    )

    parser.add_argument(
        "--strip-gutenberg",
        action="store_true",
        help="Remove the Project Gutenberg licence header and footer",
    )
    parser.add_argument(
        "--top",
        "-n",
        type=_non_negative_int,
        default=None,
        help="Also show the top N most frequent words",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the statistics as JSON",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: print to stdout)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def load_text(args: argparse.Namespace) -> str:
    """Read the text selected by the command line arguments.

    Args:
        args: Parsed command line arguments.

    Returns:
        The text to analyze (empty if the source could not be read).
    """
    # Multi-document sources strip each document before joining
    if args.files:
        return read_files(args.files, strip_gutenberg=args.strip_gutenberg)
    if args.url:
        return fetch_urls(args.url, strip_gutenberg=args.strip_gutenberg)

    if args.text is not None:
        text = args.text
    elif args.file is not None:
        text = read_file(args.file or default_input_file())
    else:
        sys.stderr.write("Enter text to analyze (finish with an empty line):\n")
        text = read_console()

    if args.strip_gutenberg:
        text = strip_gutenberg_boilerplate(text)
    return text


def render(text: str, *, as_json: bool = False, top_n: int | None = None) -> str:
    """Analyze text and render the result.

    Args:
        text: The input text to analyze.
        as_json: Render JSON instead of the text report.
        top_n: If provided, include the top N most frequent words.

    Returns:
        The rendered report.
    """
    stats = analyze(text)
    word_counts = analyze_text(text) if top_n is not None else None

    if as_json:
        top_words = (
            most_common_words(word_counts, top_n) if word_counts is not None else None
        )
        return statistics_to_json(stats, top_words=top_words)

    report = format_statistics(stats)
    if word_counts is not None:
        report += "\n\n" + format_word_frequencies(word_counts, top_n=top_n)
    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the text analytics tool.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    text = load_text(args)
    if not text and not args.json:
        _logger.info("Analysis skipped, no text to process")
        print("No text to analyze.")  # noqa: T201
        return 0

    result = render(text, as_json=args.json, top_n=args.top)

    if args.output:
        try:
            Path(args.output).write_text(result + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write {args.output} - {e}", file=sys.stderr)  # noqa: T201
            return 1
        print(f"Output written to {args.output}")  # noqa: T201
    else:
        print(result)  # noqa: T201

    return 0


if __name__ == "__main__":
    sys.exit(main())
