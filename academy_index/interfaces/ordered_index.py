"""
OrderedIndex abstract base class for in-memory binary search trees.
"""

from abc import abstractmethod
from typing import Any

from academy_index.interfaces.in_order_iterable import InOrderIterable
from academy_index.models.results import InsertResult


class OrderedIndex(InOrderIterable):
    """
    Abstract base class for record indexes keyed by a record's sort_key.

    Records only need to expose a `sort_key` attribute; the index never
    inspects anything else on them.

    Implementations:
    - AVLTree: height-balanced, keyed by enrollment time
    - BinarySearchTree: unbalanced, keyed by integer id, supports delete
    """

    @abstractmethod
    def insert(self, record: Any) -> InsertResult:
        """
        Insert a record under its sort_key.

        Args:
            record: The record to insert.

        Returns:
            InsertResult.INSERTED, or InsertResult.DUPLICATE if a record with
            the same key is already present (the tree is left unchanged).
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any | None:
        """
        Retrieve the record stored under a key.

        Args:
            key: The key to look up.

        Returns:
            The record if found, None otherwise.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of records.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """Return the height of the tree (0 when empty)."""
        pass

    @abstractmethod
    def validate(self) -> None:
        """
        Re-derive the structural invariants from scratch.

        Raises:
            StructuralInvariantViolation: If any invariant does not hold.
        """
        pass

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)
