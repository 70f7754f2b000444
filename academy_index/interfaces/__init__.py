"""
Abstract base classes for the ordered indexes.
"""

from academy_index.interfaces.in_order_iterable import InOrderIterable
from academy_index.interfaces.ordered_index import OrderedIndex

__all__ = ["InOrderIterable", "OrderedIndex"]
