"""
Pytest configuration for anagram_solver tests.
"""
import pytest

from anagram_solver.config import config as solver_config
from anagram_solver.trie import PrefixTree


@pytest.fixture
def small_tree():
    """The four-word dictionary used throughout the anagram tests."""
    return PrefixTree(["anagram", "one", "two", "ten"])


@pytest.fixture
def word_list():
    """A mixed dictionary with shared prefixes, nested words and repeated letters."""
    return [
        "a", "at", "ate", "eat", "tea", "tee", "teen", "ten", "net", "nett",
        "item", "items", "meti", "time", "emit", "mite", "it", "ti",
        "one", "two", "ten", "anagram", "nag", "rag", "ram", "mango",
    ]


@pytest.fixture
def session_config(monkeypatch, tmp_path):
    """Point session logs at a temporary directory and restore defaults afterwards."""
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(solver_config, "log_to_file", True)
    monkeypatch.setattr(solver_config, "deterministic", True)
    monkeypatch.setattr(solver_config, "strip_line_terminator", True)
    monkeypatch.setattr(solver_config, "mode", "fast")
    return solver_config
