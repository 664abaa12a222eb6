#!/usr/bin/env python3
"""
Command line entry point.

Reads a token file, builds the overlap graph, searches it for the longest
chains and prints them as compact digit sequences.
"""

import argparse
import sys
from typing import Callable, List, Optional

from token_chains.analyzer import LongestChainAnalyzer
from token_chains.constants import (
    DEFAULT_STRATEGY,
    DISPLAY_CONFIRM_THRESHOLD,
    MAX_FILE_ATTEMPTS,
    OVERLAP,
    SEARCH_STRATEGIES,
    TICKER_INTERVAL_SECONDS,
    TOKEN_LENGTH,
)
from token_chains.display import ProgressReporter, StatisticsDisplay
from token_chains.input_reader import NoValidTokensError, read_tokens
from token_chains.types import RenderSettings, TokenFile
from token_chains.utils import check_geometry

InputFn = Callable[[str], str]

RETRY_PROMPT = "Would you like to try entering the file path again? (y/n): "
SHOW_PROMPT = "Would you like to see them? (y/n): "


def prompt_choice(prompt: str, input_fn: InputFn = input) -> str:
    """Ask a yes/no question until the answer starts with y or n; returns "Y" or "N"."""
    choice = input_fn(prompt).strip()[:1].upper()
    while choice not in ("Y", "N"):
        choice = input_fn("Invalid input. Please enter 'y' or 'n': ").strip()[:1].upper()
    return choice


def load_tokens(
    file_path: str,
    token_length: int,
    max_attempts: int = MAX_FILE_ATTEMPTS,
    input_fn: InputFn = input,
) -> Optional[TokenFile]:
    """
    Read the token file, asking for another path while attempts remain.

    Returns None when the user gives up, the attempts run out, or the file
    holds no valid token.
    """
    attempts = max_attempts
    while True:
        attempts -= 1
        try:
            token_file = read_tokens(file_path, token_length)
        except NoValidTokensError as e:
            print(f"Error: {e}.")
            return None
        except OSError as e:
            if attempts <= 0:
                print("Maximum number of attempts reached. Exiting program.")
                return None
            print(f"Error: cannot open {file_path}: {e.strerror}", file=sys.stderr)
            if prompt_choice(RETRY_PROMPT, input_fn) == "N":
                print("Exiting program. No file to process.")
                return None
            file_path = input_fn("Please enter the path or name of the input file: ").strip()
        else:
            return token_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="token-chains",
        description="Find the longest chains of overlapping fixed-width numeric tokens",
    )
    parser.add_argument(
        "file", nargs="?", help="Input file with whitespace separated tokens"
    )
    parser.add_argument(
        "--token-length", type=int, default=TOKEN_LENGTH, help="Digits per token"
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=OVERLAP,
        help="Digits shared between consecutive tokens",
    )
    parser.add_argument(
        "--strategy",
        choices=SEARCH_STRATEGIES,
        default=DEFAULT_STRATEGY,
        help="Depth-first traversal implementation",
    )
    parser.add_argument(
        "--ticker-interval",
        type=float,
        default=TICKER_INTERVAL_SECONDS,
        help="Seconds between 'still searching' messages",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_FILE_ATTEMPTS,
        help="How many file paths to try before giving up",
    )
    parser.add_argument(
        "--display-threshold",
        type=int,
        default=DISPLAY_CONFIRM_THRESHOLD,
        help="Ask before printing more sequences than this",
    )
    parser.add_argument(
        "--yes", action="store_true", help="Print all sequences without asking"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over search roots"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the results"
    )
    return parser


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        check_geometry(args.token_length, args.overlap)
    except ValueError as e:
        parser.error(str(e))
    if args.ticker_interval <= 0:
        parser.error("--ticker-interval must be positive")

    reporter = ProgressReporter(not args.quiet)
    if not args.quiet:
        StatisticsDisplay.display_header("Longest sequence search")
    reporter.report("This program uses a graph-based approach to find the longest sequences.")
    reporter.report("This program may take some time to execute for large datasets.")

    file_path = args.file or input_fn(
        "Please enter the path or name of the input file (for example source.txt): "
    ).strip()

    token_file = load_tokens(file_path, args.token_length, args.max_attempts, input_fn)
    if token_file is None:
        return 1
    reporter.report_loaded(len(token_file.tokens), token_file.skipped)

    settings = RenderSettings(token_length=args.token_length, overlap=args.overlap)
    analyzer = LongestChainAnalyzer(
        token_file.tokens,
        settings=settings,
        strategy=args.strategy,
        ticker_interval=args.ticker_interval,
        verbose=not args.quiet,
        show_progress=args.progress,
    )
    result = analyzer.run()

    StatisticsDisplay.display_search_summary(result, analyzer.elapsed_seconds)

    if len(result.paths) > args.display_threshold and not args.yes:
        print(f"There are {len(result.paths)} sequences. ", end="")
        if prompt_choice(SHOW_PROMPT, input_fn) == "N":
            print("Exiting without displaying the sequences.")
            return 0

    StatisticsDisplay.display_longest_paths(result.paths, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
