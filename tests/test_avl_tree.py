"""
Tests for the AVLTree keyed by enrollment time.
"""

import itertools
import math
import random

import pytest

from academy_index.models.enrollment_time import EnrollmentTime
from academy_index.models.exceptions import StructuralInvariantViolation
from academy_index.models.results import InsertResult
from academy_index.models.trees import AVLTree
from academy_index.models.trees.heights import check_avl_invariants, check_bst_order
from academy_index.models.trees.nodes import AVLNode


def keys_of(tree):
    return [record.sort_key for record in tree]


def in_order_node_keys(node):
    if node is None:
        return []
    return in_order_node_keys(node.left) + [node.key] + in_order_node_keys(node.right)


class TestInsert:
    """Tests for insert, ordering and balance."""

    def test_chronological_scenario(self, avl_tree, make_student):
        """Test five dates come back in chronological order with bounded height."""
        dates = [
            "01/01/2024 00:00",
            "06/01/2024 00:00",
            "01/01/2023 00:00",
            "01/01/2025 00:00",
            "06/01/2023 00:00",
        ]
        for i, text in enumerate(dates):
            assert avl_tree.insert(make_student(i, text)) == InsertResult.INSERTED
            assert avl_tree.height() <= math.ceil(math.log2(avl_tree.size() + 1)) + 1

        displayed = [student.enrolled_at.display() for student in avl_tree]
        assert displayed == [
            "01/01/2023 00:00",
            "06/01/2023 00:00",
            "01/01/2024 00:00",
            "06/01/2024 00:00",
            "01/01/2025 00:00",
        ]
        assert avl_tree.height() <= math.ceil(math.log2(6)) + 1
        avl_tree.validate()

    def test_orders_by_year_before_month(self, avl_tree, make_student):
        """Test a January enrollment in a later year sorts after June of an earlier one."""
        avl_tree.insert(make_student(1, "01/15/2025 09:00"))
        avl_tree.insert(make_student(2, "06/01/2023 09:00"))

        assert [student.id for student in avl_tree] == [2, 1]

    def test_orders_by_time_within_a_day(self, avl_tree, make_student):
        """Test hour and minute break ties on the same date."""
        avl_tree.insert(make_student(1, "03/10/2024 18:05"))
        avl_tree.insert(make_student(2, "03/10/2024 09:45"))
        avl_tree.insert(make_student(3, "03/10/2024 18:00"))

        assert [student.id for student in avl_tree] == [2, 3, 1]

    @pytest.mark.parametrize(
        "order, root",
        [
            ([3, 2, 1], 2),  # Left Left
            ([1, 2, 3], 2),  # Right Right
            ([3, 1, 2], 2),  # Left Right
            ([1, 3, 2], 2),  # Right Left
        ],
    )
    def test_four_rotation_cases(self, avl_tree, make_record, order, root):
        """Test each imbalance case ends balanced around the middle key."""
        for key in order:
            avl_tree.insert(make_record(key))

        assert avl_tree._root.key == root
        assert avl_tree.height() == 2
        assert keys_of(avl_tree) == [1, 2, 3]
        avl_tree.validate()

    def test_invariants_after_every_insert(self, make_record):
        """Test balance and heights hold after each insert of a random sequence."""
        rng = random.Random(2024)
        for _ in range(5):
            tree = AVLTree()
            keys = rng.sample(range(100000), 300)
            for key in keys:
                tree.insert(make_record(key))
                check_avl_invariants(tree._root)

            assert keys_of(tree) == sorted(keys)
            assert tree.height() <= 1.45 * math.log2(len(keys) + 2)

    def test_sorted_insert_stays_balanced(self, avl_tree, make_record):
        """Test ascending inserts do not degenerate."""
        for key in range(1, 1024):
            avl_tree.insert(make_record(key))

        assert avl_tree.height() == 10
        avl_tree.validate()

    def test_permutation_invariance(self, make_record):
        """Test every insertion order of the same keys traverses identically."""
        for order in itertools.permutations([5, 1, 4, 2, 3, 6]):
            tree = AVLTree()
            for key in order:
                tree.insert(make_record(key))
            assert keys_of(tree) == [1, 2, 3, 4, 5, 6]
            tree.validate()

    def test_duplicate_rejected(self, avl_tree, make_student):
        """Test an exact duplicate enrollment time is a no-op."""
        first = make_student(1, "02/02/2024 10:00")
        avl_tree.insert(first)
        avl_tree.insert(make_student(2, "03/02/2024 10:00"))
        height_before = avl_tree.height()

        result = avl_tree.insert(make_student(3, "02/02/2024 10:00"))

        assert result == InsertResult.DUPLICATE
        assert avl_tree.size() == 2
        assert avl_tree.height() == height_before
        assert avl_tree.find(EnrollmentTime.parse("02/02/2024 10:00")) is first
        assert [student.id for student in avl_tree] == [1, 2]

    def test_find(self, avl_tree, make_student):
        """Test lookup by enrollment time."""
        student = make_student(7, "12/24/2024 20:30")
        avl_tree.insert(student)

        assert avl_tree.find(EnrollmentTime(2024, 12, 24, 20, 30)) is student
        assert avl_tree.find(EnrollmentTime(2024, 12, 24, 20, 31)) is None
        assert EnrollmentTime(2024, 12, 24, 20, 30) in avl_tree

    def test_empty_tree(self, avl_tree):
        """Test an empty tree."""
        assert list(avl_tree) == []
        assert avl_tree.height() == 0
        assert len(avl_tree) == 0
        avl_tree.validate()

    def test_traversal_is_restartable(self, avl_tree, make_record):
        """Test traversal can be repeated and does not change the tree."""
        for key in [4, 2, 6, 1, 3]:
            avl_tree.insert(make_record(key))

        partial = avl_tree.traverse_in_order()
        next(partial)
        assert keys_of(avl_tree) == [1, 2, 3, 4, 6]
        assert keys_of(avl_tree) == [1, 2, 3, 4, 6]

    def test_rotation_is_logged(self, avl_tree, make_record, caplog):
        """Test rotations emit debug records."""
        with caplog.at_level("DEBUG"):
            for key in [1, 2, 3]:
                avl_tree.insert(make_record(key))
        assert "Rotated left at 1" in caplog.text


class TestRotations:
    """Tests for the rotation primitives in isolation."""

    def build(self):
        """
        Build a left-heavy subtree:

                  40
                 /  \\
               20    50
              /  \\
            10    30
        """
        left = AVLNode(key=20, record="b", left=AVLNode(10, "a"), right=AVLNode(30, "c"), height=2)
        return AVLNode(key=40, record="d", left=left, right=AVLNode(50, "e"), height=3)

    def test_rotate_right(self):
        """Test rotate_right preserves order and recomputes heights."""
        root = self.build()
        before = in_order_node_keys(root)

        new_root = AVLTree.rotate_right(root)

        assert new_root.key == 20
        assert new_root.right.key == 40
        assert new_root.right.left.key == 30
        assert in_order_node_keys(new_root) == before
        assert new_root.right.height == 2
        assert new_root.height == 3

    def test_rotate_left_undoes_rotate_right(self):
        """Test the two rotations are inverses."""
        root = self.build()
        before = in_order_node_keys(root)

        restored = AVLTree.rotate_left(AVLTree.rotate_right(root))

        assert restored.key == 40
        assert in_order_node_keys(restored) == before
        check_avl_invariants(restored)
        check_bst_order(restored)

    def test_rotation_keeps_records(self):
        """Test records travel with their keys."""
        new_root = AVLTree.rotate_right(self.build())
        pairs = []
        stack, node = [], new_root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            pairs.append((node.key, node.record))
            node = node.right
        assert pairs == [(10, "a"), (20, "b"), (30, "c"), (40, "d"), (50, "e")]


class TestValidate:
    """Tests for the invariant checker."""

    def test_detects_stale_height(self, avl_tree, make_record):
        """Test a stale stored height is reported."""
        for key in [2, 1, 3]:
            avl_tree.insert(make_record(key))
        avl_tree._root.height = 5

        with pytest.raises(StructuralInvariantViolation) as exc_info:
            avl_tree.validate()
        assert exc_info.value.key == 2
        assert "stored height 5" in str(exc_info.value)

    def test_detects_imbalance(self):
        """Test an unbalanced chain is reported even with correct heights."""
        chain = AVLNode(1, "a", right=AVLNode(2, "b", right=AVLNode(3, "c")))
        chain.right.height = 2
        chain.height = 3

        with pytest.raises(StructuralInvariantViolation, match="balance factor"):
            check_avl_invariants(chain)
