"""
Shared pytest fixtures for the academy index tests.
"""

import random
from datetime import datetime

import pytest

from academy_index.academy.academy import Academy
from academy_index.academy.id_generator import IdGenerator
from academy_index.models.dance_style import DanceStyle
from academy_index.models.enrollment_time import EnrollmentTime
from academy_index.models.instructor import Instructor
from academy_index.models.student import Student
from academy_index.models.trees import AVLTree, BinarySearchTree


class IdRecord:
    """Minimal record exposing only an integer sort key."""

    def __init__(self, key: int) -> None:
        self.id = key
        self.sort_key = key

    def __repr__(self) -> str:
        return f"IdRecord({self.id})"


@pytest.fixture
def make_student():
    """Provide a factory building a student enrolled at "MM/DD/YYYY HH:MM"."""

    def _make(student_id: int, text: str, *styles: DanceStyle) -> Student:
        return Student(
            id=student_id,
            full_name="Ana Perez",
            enrolled_at=EnrollmentTime.parse(text),
            preferences=styles or (DanceStyle.SALSA,),
        )

    return _make


@pytest.fixture
def make_record():
    """Provide the IdRecord factory."""
    return IdRecord


@pytest.fixture
def avl_tree():
    """Provide a fresh AVLTree instance."""
    return AVLTree()


@pytest.fixture
def bst():
    """Provide a fresh BinarySearchTree instance."""
    return BinarySearchTree()


@pytest.fixture
def sample_bst():
    """Provide the seven-node tree built from [50, 20, 80, 10, 30, 70, 90]."""
    tree = BinarySearchTree()
    for key in [50, 20, 80, 10, 30, 70, 90]:
        tree.insert(IdRecord(key))
    return tree


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2025-06-15 10:30."""
    return lambda: datetime(2025, 6, 15, 10, 30)


@pytest.fixture
def academy(fixed_clock):
    """Provide an Academy with a seeded id generator and a frozen clock."""
    return Academy(id_generator=IdGenerator(rng=random.Random(7)), clock=fixed_clock)


@pytest.fixture
def sample_instructors():
    """Provide instructors covering every payroll bonus."""
    return [
        Instructor(id=50, full_name="Carla Rojas", start_year=2015, base_salary=800000.0,
                   dance_style=DanceStyle.SALSA),
        Instructor(id=20, full_name="Diego Soto", start_year=2022, base_salary=600000.0,
                   dance_style=DanceStyle.TANGO),
        Instructor(id=80, full_name="Elena Mora", start_year=2023, base_salary=500000.0,
                   dance_style=DanceStyle.BACHATA),
    ]
