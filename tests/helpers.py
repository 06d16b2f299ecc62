"""Shared test helpers."""

from collections import Counter


def is_playable(word: str, available: str) -> bool:
    """Returns whether `word` can be spelled from the characters of `available`."""
    tiles = Counter(available)
    return all(n <= tiles[ch] for ch, n in Counter(word).items())
