"""Prefix tree (trie) dictionary structure.

Nodes are kept in a flat arena and addressed by integer handle.  Each node maps
characters to the handles of its children, so the tree never holds nested node
references and all operations walk it iteratively.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

NodeHandle: TypeAlias = int

ROOT: NodeHandle = 0
"""Handle of the artificial root node."""


@dataclass
class TrieNode:
    """A single node of the prefix tree."""

    is_word: bool = False
    """True iff the path from the root to this node spells a stored word."""

    children: dict[str, NodeHandle] = field(default_factory=dict)
    """Mapping from edge character to the handle of the child node."""


class PrefixTree:
    """A mutable set of words stored as a prefix tree.

    >>> tree = PrefixTree()
    >>> tree.insert("item")
    >>> tree.insert("meti")
    >>> tree.contains("item"), tree.contains("ite")
    (True, False)
    >>> tree.delete("item")
    >>> tree.size
    1
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.nodes: list[TrieNode | None] = [TrieNode()]
        """Node arena.  Slots of pruned nodes hold None until reused."""

        self._free: list[NodeHandle] = []
        """Handles of pruned nodes, available for reuse."""

        self._size = 0

        for word in words:
            self.insert(word)

    @property
    def size(self) -> int:
        """Number of distinct words currently stored."""
        return self._size

    @property
    def node_count(self) -> int:
        """Number of live nodes, including the root."""
        return len(self.nodes) - len(self._free)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        """Yield every stored word (in no particular order)."""
        stack: list[tuple[NodeHandle, str]] = [(ROOT, "")]
        while stack:
            handle, prefix = stack.pop()
            node = self.node(handle)
            if node.is_word:
                yield prefix
            for ch, child in node.children.items():
                stack.append((child, prefix + ch))

    def __repr__(self) -> str:
        return f"<PrefixTree size={self._size} nodes={self.node_count}>"

    @property
    def root(self) -> TrieNode:
        """The artificial root node."""
        return self.node(ROOT)

    def node(self, handle: NodeHandle) -> TrieNode:
        """Return the live node stored under `handle`."""
        node = self.nodes[handle]
        assert node is not None, f"Node {handle} has been pruned."
        return node

    def _new_node(self) -> NodeHandle:
        if self._free:
            handle = self._free.pop()
            self.nodes[handle] = TrieNode()
            return handle
        self.nodes.append(TrieNode())
        return len(self.nodes) - 1

    def _release(self, handle: NodeHandle) -> None:
        self.nodes[handle] = None
        self._free.append(handle)

    def _find(self, word: str) -> NodeHandle | None:
        """Return the handle of the node reached by spelling `word`, or None."""
        handle = ROOT
        for ch in word:
            next_handle = self.node(handle).children.get(ch)
            if next_handle is None:
                return None
            handle = next_handle
        return handle

    def insert(self, word: str) -> None:
        """Insert a word.  Inserting a word that is already stored changes nothing.

        The empty string marks the root itself.
        """
        handle = ROOT
        for ch in word:
            children = self.node(handle).children
            next_handle = children.get(ch)
            if next_handle is None:
                next_handle = self._new_node()
                children[ch] = next_handle
            handle = next_handle

        node = self.node(handle)
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def delete(self, word: str) -> None:
        """Remove a word, pruning nodes that no longer lead to any stored word.

        Does nothing if the word is not stored.  While unwinding from the end of the word
        towards the root, each node that is neither a word nor has remaining children is
        detached from its parent.  Pruning stops for good at the first node that must be
        kept: a branch point shared with other words, or the end of a shorter word.
        """
        path: list[tuple[NodeHandle, str]] = []
        handle = ROOT
        for ch in word:
            next_handle = self.node(handle).children.get(ch)
            if next_handle is None:
                return
            path.append((handle, ch))
            handle = next_handle

        node = self.node(handle)
        if not node.is_word:
            return
        node.is_word = False
        self._size -= 1

        for parent, ch in reversed(path):
            children = self.node(parent).children
            child = children[ch]
            child_node = self.node(child)
            if child_node.is_word or child_node.children:
                break
            del children[ch]
            self._release(child)

    def contains(self, word: str) -> bool:
        """Return whether `word` is stored.  The empty string is always contained."""
        if not word:
            return True
        handle = self._find(word)
        return handle is not None and self.node(handle).is_word
