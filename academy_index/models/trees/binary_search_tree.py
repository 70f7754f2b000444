"""
Unbalanced binary search tree for records keyed by integer id.

No height or balance bookkeeping is kept; shape depends on insertion order.
Sorted input builds a chain as deep as the record count, so every walk down
the tree is a loop rather than recursion.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from academy_index.interfaces.ordered_index import OrderedIndex
from academy_index.models.exceptions import StructuralInvariantViolation
from academy_index.models.results import DeleteResult, InsertResult
from academy_index.models.trees.heights import check_bst_order, derive_height
from academy_index.models.trees.in_order_iterator import InOrderIterator
from academy_index.models.trees.nodes import BSTNode


class BinarySearchTree(OrderedIndex):
    """
    Plain binary search tree implementation of OrderedIndex.

    For every node, all keys on the left are smaller and all keys on the
    right are larger. Deleting a node with two children swaps its payload
    with the in-order successor and removes the successor instead.
    """

    def __init__(self) -> None:
        self._root: BSTNode | None = None
        self._size: int = 0

    def insert(self, record: Any) -> InsertResult:
        """Insert a record keyed by record.sort_key. O(height)"""
        key = record.sort_key
        if self._root is None:
            self._root = BSTNode(key=key, record=record)
            self._size = 1
            return InsertResult.INSERTED

        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                logging.warning(f"Duplicate id {key}; insert ignored")
                return InsertResult.DUPLICATE

        new_node = BSTNode(key=key, record=record)
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        return InsertResult.INSERTED

    def find(
        self, key: int, visitor: Callable[[Any], None] | None = None
    ) -> Any | None:
        """
        Retrieve a record by id.

        Args:
            key: The id to look up.
            visitor: Called with the record of every node examined, in
                descent order, including the matching node.

        Returns:
            The record if found, None otherwise.
        """
        node = self._find_node(key, visitor)
        return node.record if node is not None else None

    def has(self, key: int) -> bool:
        return self._find_node(key) is not None

    def delete(self, key: int) -> DeleteResult:
        """Remove the record stored under key. O(height)"""
        parent = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right

        if node is None:
            return DeleteResult.NOT_FOUND

        if node.left is not None and node.right is not None:
            # Two children: swap payload with the in-order successor
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            node.key, successor.key = successor.key, node.key
            node.record, successor.record = successor.record, node.record
            logging.debug(f"Promoted successor {node.key} into position of id {key}")

            # The successor now holds key and has no left child
            parent, node = successor_parent, successor

        # Node has at most one child
        child = node.left if node.left is not None else node.right
        self._replace_node(parent, node, child)

        self._size -= 1
        logging.debug(f"Removed id {key}")
        return DeleteResult.REMOVED

    def clear(self) -> None:
        """Drop every node."""
        self._root = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return derive_height(self._root)

    def validate(self) -> None:
        count = check_bst_order(self._root)
        if count != self._size:
            raise StructuralInvariantViolation(
                None, f"size counter {self._size} != node count {count}"
            )

    def __iter__(self) -> Iterator[Any]:
        return self.traverse_in_order()

    def traverse_in_order(self) -> Iterator[Any]:
        return InOrderIterator(self._root)

    def _find_node(
        self, key: int, visitor: Callable[[Any], None] | None = None
    ) -> BSTNode | None:
        """Find node by key, reporting each examined record to visitor."""
        current = self._root
        while current is not None:
            if visitor is not None:
                visitor(current.record)
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _replace_node(
        self, parent: BSTNode | None, node: BSTNode, child: BSTNode | None
    ) -> None:
        """Replace node with child under parent."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
