"""Anagram Solver.

Finds every dictionary word that can be spelled from a subset of a given multiset of
characters.  The dictionary is stored in a prefix tree, which is walked depth-first while
spending from a budget of the available characters.
"""

import argparse
import sys
from time import time

from .config import config as solver_config
from .prompt import run
from .solver import Mode, create_solver
from .util import int_comma, time_str
from .wordlist import DictionaryUnavailableError, read_dictionary


def parse_args(argv: list[str] | None = None) -> tuple[str, Mode]:
    """Parse the command line into a dictionary path and solver mode.

    An unknown mode falls back to the configured default, and extra arguments are ignored;
    both are reported but are not errors.
    """
    parser = argparse.ArgumentParser(
        prog="anagram-solver",
        description="Find all dictionary words that can be formed from a set of characters",
    )
    parser.add_argument("dictionary", type=str, help="Path to the dictionary file")
    parser.add_argument(
        "mode",
        type=str,
        nargs="?",
        default=None,
        help='Solver speed: "fast" (prefix tree, default) or "slow" (permutations)',
    )
    args, extra = parser.parse_known_args(argv)

    mode = Mode(solver_config.mode)
    if args.mode is not None:
        try:
            mode = Mode(args.mode)
        except ValueError:
            print("Invalid mode was passed. We ignore and continue with default value.")
    if extra:
        print("Ignore additional parameters.")

    return args.dictionary, mode


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the anagram solver."""
    dictionary_path, mode = parse_args(argv)

    try:
        words = read_dictionary(dictionary_path)
    except DictionaryUnavailableError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    start = time()
    solver = create_solver(mode)
    solver.add_dictionary(words)
    print(
        f"Loaded {int_comma(len(words))} words from {dictionary_path} "
        f"({mode.value} mode, {time_str(time() - start)})"
    )

    run(solver)
