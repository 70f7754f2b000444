"""
Height bookkeeping and invariant checks shared by both trees.

height() and balance_factor() read the stored height and are O(1). The
check_* functions re-derive everything bottom-up without trusting stored
heights, which makes them usable as an independent oracle in tests.
"""

from typing import Any

from academy_index.models.exceptions import StructuralInvariantViolation


def height(node: Any) -> int:
    """Stored height of a subtree, 0 for an empty one."""
    return node.height if node is not None else 0


def max_height(a: int, b: int) -> int:
    return a if a > b else b


def update_height(node: Any) -> None:
    """Recompute a node's height from its children's stored heights."""
    node.height = 1 + max_height(height(node.left), height(node.right))


def balance_factor(node: Any) -> int:
    """height(left) - height(right), 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def check_bst_order(root: Any) -> int:
    """
    Verify strict key ordering across the whole tree.

    Args:
        root: Root node, or None.

    Returns:
        The number of nodes visited.

    Raises:
        StructuralInvariantViolation: If a key is out of order or repeated.
    """
    count = 0
    previous = None
    stack: list[Any] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        if previous is not None and not previous.key < current.key:
            raise StructuralInvariantViolation(
                current.key, f"key not greater than in-order predecessor {previous.key!r}"
            )
        previous = current
        count += 1
        current = current.right
    return count


def check_avl_invariants(root: Any) -> int:
    """
    Verify stored heights and the AVL balance condition at every node.

    Args:
        root: Root node, or None.

    Returns:
        The derived height of the tree.

    Raises:
        StructuralInvariantViolation: On a stale height or an unbalanced node.
    """
    if root is None:
        return 0

    left_height = check_avl_invariants(root.left)
    right_height = check_avl_invariants(root.right)
    derived = 1 + max_height(left_height, right_height)

    if root.height != derived:
        raise StructuralInvariantViolation(
            root.key, f"stored height {root.height} != derived height {derived}"
        )
    if abs(left_height - right_height) > 1:
        raise StructuralInvariantViolation(
            root.key, f"balance factor {left_height - right_height} out of [-1, 1]"
        )
    return derived


def derive_height(root: Any) -> int:
    """
    Height computed by walking the tree level by level; for trees that store none.

    Iterative, so degenerate chains deeper than the recursion limit are fine.
    """
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth
