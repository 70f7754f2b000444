"""
Node types for the two trees.

Each node is referenced by exactly one parent (or the tree's root slot), so
unlinking a node releases its whole subtree together with its records.
"""

from dataclasses import dataclass
from typing import Any

from academy_index.models.enrollment_time import EnrollmentTime


@dataclass
class AVLNode:
    """Node in the AVL tree."""

    key: EnrollmentTime
    record: Any
    left: "AVLNode | None" = None
    right: "AVLNode | None" = None
    height: int = 1


@dataclass
class BSTNode:
    """Node in the unbalanced binary search tree."""

    key: int
    record: Any
    left: "BSTNode | None" = None
    right: "BSTNode | None" = None
