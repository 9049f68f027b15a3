"""
clue_index.py
=============
Ordered set of collected clues, stored as a binary search tree.

Clues are compared case-insensitively: "Golden key" and "golden KEY" are the
same clue, and the casing of the first insertion is the one kept. Walking
the tree in order yields the clues alphabetically, regardless of the order
in which they were found.

All traversals use an explicit stack, so tree depth is never limited by the
interpreter's recursion limit (inserting already-sorted clues degenerates
the tree into a list).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

logger = logging.getLogger("haunted_mansion.clue_index")


def compare_clues(a: str, b: str) -> int:
    """
    Compare two clues case-insensitively.

    Returns:
        Negative if a sorts before b, 0 if they are the same clue,
        positive if a sorts after b.
    """
    la, lb = a.lower(), b.lower()
    return (la > lb) - (la < lb)


@dataclass
class ClueIndexNode:
    text:  str
    left:  Optional["ClueIndexNode"] = None
    right: Optional["ClueIndexNode"] = None


class ClueIndex:
    """
    Binary search tree of unique clue strings.

    Attributes:
        root: Root node, or None while the index is empty.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueIndexNode] = None
        self._size = 0

    def insert(self, text: str) -> bool:
        """
        Add `text` to the index.

        Empty text and clues already present (ignoring case) are ignored.

        Returns:
            True if a new node was added.
        """
        if not text:
            return False

        if self.root is None:
            self.root = ClueIndexNode(text)
            self._size += 1
            logger.debug("Clue index root set to %r", text)
            return True

        node = self.root
        while True:
            cmp = compare_clues(text, node.text)
            if cmp == 0:
                logger.debug("Duplicate clue %r ignored (kept %r)", text, node.text)
                return False
            if cmp < 0:
                if node.left is None:
                    node.left = ClueIndexNode(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueIndexNode(text)
                    break
                node = node.right

        self._size += 1
        logger.debug("Clue %r added; index size=%d", text, self._size)
        return True

    def __iter__(self) -> Iterator[str]:
        stack: List[ClueIndexNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def in_order(self) -> List[str]:
        """Return all clues in ascending case-insensitive order."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str) or not text:
            return False
        node = self.root
        while node is not None:
            cmp = compare_clues(text, node.text)
            if cmp == 0:
                return True
            node = node.left if cmp < 0 else node.right
        return False

    def clear(self) -> int:
        """
        Release every node exactly once and empty the index.

        Returns:
            Number of nodes released.
        """
        released = 0
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not None:
                    stack.append(child)
            node.left = node.right = None
            released += 1
        self.root  = None
        self._size = 0
        logger.debug("Released %d clue index nodes.", released)
        return released
