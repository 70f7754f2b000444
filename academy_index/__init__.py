"""
In-memory ordered indexes for a dance academy's records.

This package provides two binary search trees with:
- AVLTree - students ordered by enrollment time, O(log N) insert with rebalancing
- BinarySearchTree - instructors ordered by id, insert/find/delete by successor swap
- Academy - owns one index of each kind and drives them from user commands
"""

from academy_index.academy.academy import Academy
from academy_index.models.trees import AVLTree, BinarySearchTree

__all__ = ["Academy", "AVLTree", "BinarySearchTree"]
