"""Module for reading dictionary files."""

from os import PathLike
from pathlib import Path


class DictionaryUnavailableError(OSError):
    """The dictionary file could not be found or read."""


def extract_words(text: str) -> list[str]:
    """Split dictionary text into words.

    Lines end at "\\n" (an optional "\\r" before it is dropped); no other character breaks
    a line.  Each line is split on single spaces and every token is kept, so consecutive
    spaces yield empty words.  Words are not trimmed or case-folded.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()  # trailing newline, or empty text

    words: list[str] = []
    for line in lines:
        words.extend(line.removesuffix("\r").split(" "))
    return words


def read_dictionary(path: str | PathLike) -> list[str]:
    """Read the words of a dictionary file.

    Args:
        path: Path to a UTF-8 text file of space- or newline-separated words.

    Returns:
        The list of words, in file order, duplicates included.

    Raises:
        DictionaryUnavailableError: If the file is missing or cannot be read.
    """
    dictionary_path = Path(path)
    if not dictionary_path.is_file():
        raise DictionaryUnavailableError(f"Dictionary file not found: {dictionary_path}")

    try:
        # newline="" keeps line endings as written, for extract_words to split
        with dictionary_path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailableError(
            f"Failed to read dictionary file {dictionary_path}: {e}"
        ) from e
    return extract_words(text)
