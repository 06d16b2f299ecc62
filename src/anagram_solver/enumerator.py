"""Enumerate the stored words that can be spelled from a multiset of characters."""

from collections import Counter
from collections.abc import Iterator

from anagram_solver.trie import ROOT, NodeHandle, PrefixTree


class CharacterBudget(Counter[str]):
    """Remaining usable count of each character during one query."""

    @classmethod
    def from_query(cls, available: str) -> "CharacterBudget":
        """Count every character of `available`, whitespace and line terminators included."""
        return cls(available)

    def can_take(self, ch: str) -> bool:
        """Return whether at least one `ch` is still available."""
        return self[ch] >= 1

    def spend(self, ch: str) -> None:
        """Use up one `ch`.  Must be paired with a later `refund(ch)`."""
        self[ch] -= 1

    def refund(self, ch: str) -> None:
        """Give back one `ch` taken by `spend`."""
        self[ch] += 1


def find_all_subset_words(tree: PrefixTree, available: str) -> set[str]:
    """Find every stored word that uses no more of each character than `available` holds.

    The query need not be used up.  Only edges whose character still has budget left are
    followed, so the walk is bounded by the shape of the tree rather than by the number of
    arrangements of `available`.  The walk keeps its own stack, so word length is not
    limited by the interpreter's recursion limit.

    Args:
        tree (PrefixTree): The dictionary to search.
        available (str): The characters that may be used, taken verbatim.

    Returns:
        The set of matching words.  Empty for an empty query unless the empty word is stored.
    """
    budget = CharacterBudget.from_query(available)
    found: set[str] = set()
    path: list[str] = []

    root = tree.node(ROOT)
    if root.is_word:
        found.add("")

    # One frame per node on the current path: the children still to be tried.
    # path[i] is the character spent to enter frame i + 1.
    stack: list[Iterator[tuple[str, NodeHandle]]] = [iter(root.children.items())]
    while stack:
        for ch, child in stack[-1]:
            if not budget.can_take(ch):
                continue
            budget.spend(ch)
            path.append(ch)
            node = tree.node(child)
            if node.is_word:
                found.add("".join(path))
            stack.append(iter(node.children.items()))
            break
        else:
            # Subtree finished: undo the step that entered it
            stack.pop()
            if path:
                budget.refund(path.pop())

    return found
