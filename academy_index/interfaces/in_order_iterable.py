"""
InOrderIterable protocol for trees that can be walked in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class InOrderIterable(ABC):
    """
    Protocol for data structures that yield their records in ascending key order.

    Implementations must support:
    - Full iteration via __iter__
    - An explicit traverse_in_order() that returns a fresh iterator each call

    Traversal never mutates the structure, so it may be restarted any number
    of times.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all records in ascending key order."""
        pass

    @abstractmethod
    def traverse_in_order(self) -> Iterator[Any]:
        """
        Return a new lazy iterator over all records.

        Returns:
            Iterator yielding records in ascending key order.
        """
        pass
