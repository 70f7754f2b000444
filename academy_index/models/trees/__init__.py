"""
Tree implementations for the academy indexes.
"""

from academy_index.models.trees.avl_tree import AVLTree
from academy_index.models.trees.binary_search_tree import BinarySearchTree

__all__ = ["AVLTree", "BinarySearchTree"]
