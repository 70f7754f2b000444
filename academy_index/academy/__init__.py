"""
Orchestration layer owning one index of each kind.
"""

from academy_index.academy.academy import Academy
from academy_index.academy.id_generator import IdGenerator

__all__ = ["Academy", "IdGenerator"]
