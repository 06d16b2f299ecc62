"""Interactive anagram session: read queries line by line and print the matches."""

import sys
from datetime import datetime
from io import StringIO
from pathlib import Path
from time import time
from typing import TextIO

from sortedcontainers import SortedSet

from anagram_solver.config import config as solver_config
from anagram_solver.solver import AnagramSolver
from anagram_solver.util import TIMESTAMP_FMT, int_comma, time_str

PROMPT = "Pass a set of characters that you want to find anagram words for.."


def strip_line_terminator(line: str) -> str:
    """Remove a trailing "\\n" or "\\r\\n" from an input line, and nothing else."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def print_anagrams(anagrams: set[str], *, out: TextIO) -> None:
    """Print the anagrams of one query."""
    if not anagrams:
        print("No anagrams found!", file=out)
        return

    words = SortedSet(anagrams) if solver_config.deterministic else anagrams
    for word in words:
        print(f"Anagram found:{word}", file=out)
    print(f"Total found: {int_comma(len(anagrams))}", file=out)


def serve(
    solver: AnagramSolver,
    *,
    stdin: TextIO,
    out: TextIO,
    logf: TextIO,
) -> int:
    """Answer queries read from `stdin` until end of input or an interrupt.

    Args:
        solver (AnagramSolver): A solver with its dictionary already loaded.
        stdin: Stream of query lines.
        out: Stream for prompts and results.
        logf: File object to log the session to.

    Returns:
        The number of queries answered.
    """
    n_queries = 0
    try:
        while True:
            print(PROMPT, file=out, flush=True)
            line = stdin.readline()
            if not line:
                break

            characters = (
                strip_line_terminator(line) if solver_config.strip_line_terminator else line
            )

            start = time()
            anagrams = solver.find_all_anagrams(characters)
            elapsed = time() - start
            n_queries += 1

            print_anagrams(anagrams, out=out)
            print(
                f"Query {n_queries}: {characters!r} -> {int_comma(len(anagrams))} anagrams "
                f"in {time_str(elapsed)}",
                file=logf,
                flush=True,
            )
    except KeyboardInterrupt:
        print("Session interrupted by user.", file=logf, flush=True)
        print("Session interrupted by user.", file=out)

    print(f"Session ended after {int_comma(n_queries)} queries.", file=logf, flush=True)
    return n_queries


def run(solver: AnagramSolver, *, stdin: TextIO | None = None, out: TextIO | None = None) -> int:
    """Run an interactive session, logging it to a file under the configured log directory.

    Returns:
        The number of queries answered.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    start_time_str = datetime.now().astimezone().strftime(TIMESTAMP_FMT)

    if not solver_config.log_to_file:
        return _run_logged(solver, stdin=stdin, out=out, logf=StringIO(), start=start_time_str)

    logfile = Path(solver_config.log_dir) / f"session-{datetime.now():%Y%m%d-%H%M%S-%f}.log"
    print(f"Log file: {logfile}", file=out)
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        return _run_logged(solver, stdin=stdin, out=out, logf=logf, start=start_time_str)


def _run_logged(
    solver: AnagramSolver, *, stdin: TextIO, out: TextIO, logf: TextIO, start: str
) -> int:
    print(f"Start time: {start}", file=logf, flush=True)
    print(f"Solver: {type(solver).__name__}", file=logf, flush=True)
    return serve(solver, stdin=stdin, out=out, logf=logf)
