#!/usr/bin/env python3
"""Tag cloud generator - renders word frequencies of a text file as HTML.

Usage:
    # Tag cloud of the 20 most frequent words
    python -m python_pkg.tag_cloud.cli cloud --input text.txt --output cloud.html --top 20

    # Alphabetical table of every word (".html" is appended when missing)
    python -m python_pkg.tag_cloud.cli table --input text.txt --output counts

    # Missing paths and word counts are asked for interactively
    python -m python_pkg.tag_cloud.cli cloud

    # Custom separator characters
    python -m python_pkg.tag_cloud.cli cloud -i text.txt -o cloud.html -n 5 --separators " .,"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.config import load_config
from python_pkg.tag_cloud.documents import html_output_path, read_lines, write_lines
from python_pkg.tag_cloud.errors import (
    DocumentUnreadableError,
    InvalidSelectionSizeError,
    OutputUnwritableError,
)
from python_pkg.tag_cloud.frequency import count_words
from python_pkg.tag_cloud.renderer import render_table, render_tag_cloud
from python_pkg.tag_cloud.selector import select

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from python_pkg.tag_cloud.frequency import FrequencyTable

_logger = logging.getLogger(__name__)

INPUT_PROMPT = "Enter the name of the input file: "
OUTPUT_PROMPT = "Enter the name of the output file: "
COUNT_PROMPT = "Number of words to include: "


def parse_count(raw: str) -> int | None:
    """Parse an operator-entered word count, returning None if not an integer."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def prompt_for_selection(
    table: FrequencyTable,
    initial: str | None = None,
    *,
    ask: Callable[[str], str] | None = None,
) -> list[tuple[str, int]]:
    """Ask for a word count until it selects successfully.

    Non-numeric, negative and too-large answers are all rejected with a
    hint and asked again.

    Args:
        table: Word counts to select from.
        initial: Count given up front (e.g. on the command line), tried first.
        ask: Function reading one answer for a prompt (defaults to input).

    Returns:
        The selection for the first valid count.

    Raises:
        EOFError: If input ends before a valid count is entered.
    """
    if ask is None:
        ask = input

    raw = initial
    while True:
        if raw is None:
            raw = ask(COUNT_PROMPT)
        n = parse_count(raw)
        raw = None
        if n is None:
            sys.stdout.write("Please enter a non-negative integer.\n")
            continue
        try:
            return select(table, n)
        except InvalidSelectionSizeError as e:
            _logger.debug(str(e))
            if n < 0:
                sys.stdout.write("Please enter a non-negative integer.\n")
            else:
                sys.stdout.write(
                    "Please enter an integer <= the number of words "
                    f"in the input file ({e.available}).\n"
                )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud or word count table from a text file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "mode",
        choices=["cloud", "table"],
        help="cloud: top N words sized by frequency; table: every word with its count",
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
        help="Path of the HTML report (prompted for if omitted)",
    )
    parser.add_argument(
        "--top",
        "-n",
        type=str,
        default=None,
        help="Number of words in the tag cloud (prompted for if omitted or invalid)",
    )
    parser.add_argument(
        "--separators",
        "-s",
        type=str,
        default=None,
        help="Characters that separate words (default: whitespace and punctuation)",
    )
    parser.add_argument(
        "--stylesheet",
        type=str,
        default=None,
        help="Stylesheet href used by the tag cloud (default: tagcloud.css)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the tag cloud generator.

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

    config = load_config(separators=args.separators, stylesheet=args.stylesheet)

    try:
        input_name = args.input or input(INPUT_PROMPT).strip()
        lines = read_lines(input_name)
        output_name = args.output or input(OUTPUT_PROMPT).strip()

        table = count_words(lines, config.separators)

        if args.mode == "table":
            report = render_table(table, input_name)
            output_path = html_output_path(output_name)
        else:
            selection = prompt_for_selection(table, args.top)
            report = render_tag_cloud(
                selection, input_name, stylesheet=config.stylesheet
            )
            output_path = output_name

        written = write_lines(output_path, report)
        sys.stdout.write(f"Output written to {written}\n")

    except (DocumentUnreadableError, OutputUnwritableError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except EOFError:
        sys.stderr.write("Error: Input ended before all answers were given\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
