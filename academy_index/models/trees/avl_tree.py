"""
AVL Tree implementation for records ordered by enrollment time.

Insert-only: the tree rebalances on the way back up from every insert and
never removes nodes.
"""

import logging
from collections.abc import Iterator
from typing import Any

from academy_index.interfaces.ordered_index import OrderedIndex
from academy_index.models.exceptions import StructuralInvariantViolation
from academy_index.models.results import InsertResult
from academy_index.models.trees.heights import (
    balance_factor,
    check_avl_invariants,
    check_bst_order,
    height,
    update_height,
)
from academy_index.models.trees.in_order_iterator import InOrderIterator
from academy_index.models.trees.nodes import AVLNode


class AVLTree(OrderedIndex):
    """
    AVL Tree implementation of OrderedIndex.

    Properties maintained:
    1. In-order traversal yields strictly ascending keys
    2. |height(left) - height(right)| <= 1 at every node
    3. Every stored height equals 1 + max of its children's heights
    """

    def __init__(self) -> None:
        self._root: AVLNode | None = None
        self._size: int = 0

    def insert(self, record: Any) -> InsertResult:
        """Insert a record keyed by record.sort_key. O(log N)"""
        key = record.sort_key
        self._root, result = self._insert(self._root, key, record)
        if result.inserted:
            self._size += 1
        else:
            logging.warning(f"Duplicate enrollment time {key}; insert ignored")
        return result

    def find(self, key: Any) -> Any | None:
        """Retrieve a record by key. O(log N)"""
        node = self._find_node(key)
        return node.record if node is not None else None

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return height(self._root)

    def validate(self) -> None:
        count = check_bst_order(self._root)
        check_avl_invariants(self._root)
        if count != self._size:
            raise StructuralInvariantViolation(
                None, f"size counter {self._size} != node count {count}"
            )

    def __iter__(self) -> Iterator[Any]:
        return self.traverse_in_order()

    def traverse_in_order(self) -> Iterator[Any]:
        return InOrderIterator(self._root)

    def _find_node(self, key: Any) -> AVLNode | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _insert(
        self, node: AVLNode | None, key: Any, record: Any
    ) -> tuple[AVLNode, InsertResult]:
        """Insert below node and return the new subtree root."""
        if node is None:
            return AVLNode(key=key, record=record), InsertResult.INSERTED

        if key < node.key:
            node.left, result = self._insert(node.left, key, record)
        elif key > node.key:
            node.right, result = self._insert(node.right, key, record)
        else:
            return node, InsertResult.DUPLICATE

        if not result.inserted:
            return node, result

        update_height(node)
        balance = balance_factor(node)

        # Left Left
        if balance > 1 and key < node.left.key:
            return self.rotate_right(node), result

        # Right Right
        if balance < -1 and key > node.right.key:
            return self.rotate_left(node), result

        # Left Right
        if balance > 1 and key > node.left.key:
            node.left = self.rotate_left(node.left)
            return self.rotate_right(node), result

        # Right Left
        if balance < -1 and key < node.right.key:
            node.right = self.rotate_right(node.right)
            return self.rotate_left(node), result

        return node, result

    @staticmethod
    def rotate_right(y: AVLNode) -> AVLNode:
        """
        Right rotation around y.

              y            x
             / \\          / \\
            x   C   ->   A   y
           / \\              / \\
          A   T            T   C

        Returns:
            x, the new subtree root.
        """
        x = y.left
        t = x.right

        x.right = y
        y.left = t

        # Child first, then the new root
        update_height(y)
        update_height(x)

        logging.debug(f"Rotated right at {y.key}; new subtree root {x.key}")
        return x

    @staticmethod
    def rotate_left(x: AVLNode) -> AVLNode:
        """Left rotation around x; mirror of rotate_right. Returns the new root."""
        y = x.right
        t = y.left

        y.left = x
        x.right = t

        update_height(x)
        update_height(y)

        logging.debug(f"Rotated left at {x.key}; new subtree root {y.key}")
        return y
