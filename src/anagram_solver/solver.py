"""Anagram solvers: the prefix-tree solver and a flat-set reference solver."""

from collections.abc import Iterable
from enum import Enum
from typing import Protocol

from bitarray import bitarray
from bitarray.util import zeros

from anagram_solver.enumerator import find_all_subset_words
from anagram_solver.trie import PrefixTree


class Mode(str, Enum):
    """Which solver to use."""

    FAST = "fast"
    SLOW = "slow"


class AnagramSolver(Protocol):
    """Something that can hold a dictionary and find its subset anagrams."""

    def add_dictionary(self, words: Iterable[str]) -> None:
        """Add every word of `words` to the dictionary."""
        ...

    def find_all_anagrams(self, characters: str) -> set[str]:
        """Return the dictionary words that can be spelled from `characters`."""
        ...


def load_dictionary(words: Iterable[str]) -> PrefixTree:
    """Build a prefix tree from a sequence of words.

    Every word is stored as given, including the empty word.
    """
    return PrefixTree(words)


def query(tree: PrefixTree, characters: str) -> set[str]:
    """Return the words of `tree` that can be spelled from `characters`.

    The characters are used verbatim: nothing is trimmed or case-folded.
    """
    return find_all_subset_words(tree, characters)


class TrieSolver:
    """Solver backed by a prefix tree and a budget-guided walk."""

    def __init__(self) -> None:
        self.tree = PrefixTree()

    def add_dictionary(self, words: Iterable[str]) -> None:
        for word in words:
            self.tree.insert(word)

    def find_all_anagrams(self, characters: str) -> set[str]:
        return query(self.tree, characters)

    def __len__(self) -> int:
        return self.tree.size


class FlatSetSolver:
    """Reference solver that tries every arrangement of the query against a word set.

    Exponential in the query length.  Useful for cross-checking `TrieSolver` on short
    queries.
    """

    def __init__(self) -> None:
        self.words: set[str] = set()

    def add_dictionary(self, words: Iterable[str]) -> None:
        self.words.update(words)

    def find_all_anagrams(self, characters: str) -> set[str]:
        found: set[str] = set()
        combination: list[str] = []
        used = zeros(len(characters))
        self._arrange(characters, used, combination, found)
        return found

    def _arrange(
        self,
        characters: str,
        used: bitarray,
        combination: list[str],
        found: set[str],
    ) -> None:
        word = "".join(combination)
        if word in self.words:
            found.add(word)

        # Extend the combination by each unused position in turn
        for i, ch in enumerate(characters):
            if used[i]:
                continue
            used[i] = True
            combination.append(ch)
            try:
                self._arrange(characters, used, combination, found)
            finally:
                combination.pop()
                used[i] = False

    def __len__(self) -> int:
        return len(self.words)


def create_solver(mode: Mode | str) -> AnagramSolver:
    """Create an empty solver for the given mode."""
    mode = Mode(mode)
    if mode is Mode.FAST:
        return TrieSolver()
    if mode is Mode.SLOW:
        return FlatSetSolver()
    raise ValueError(f"Invalid mode: {mode}")
