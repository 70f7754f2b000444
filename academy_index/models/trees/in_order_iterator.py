"""
Stack-based in-order iterator shared by both trees.
"""

from collections.abc import Iterator
from typing import Any


class InOrderIterator(Iterator[Any]):
    """Iterator yielding node records in ascending key order."""

    def __init__(self, root: Any) -> None:
        self._stack: list[Any] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.record

    def _push_left_path(self, node: Any) -> None:
        """Push leftmost path to stack."""
        while node is not None:
            self._stack.append(node)
            node = node.left
