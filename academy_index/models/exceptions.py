"""
Custom exceptions for the academy indexes.

Ordinary outcomes such as a duplicate key or a missing id are reported as
results (see results.py); the exceptions here are for conditions callers are
not expected to handle as part of normal flow.
"""

from typing import Any


class AcademyIndexError(Exception):
    """Base class for all errors raised by this package."""


class StructuralInvariantViolation(AcademyIndexError):
    """
    Raised when a tree's ordering, balance or height bookkeeping is broken.

    This indicates a bug in the tree implementation, never a user error.
    """

    def __init__(self, key: Any, reason: str):
        """
        Initialize invariant violation.

        Args:
            key: Key of the node where the violation was detected.
            reason: Human readable description of the broken invariant.
        """
        self.key = key
        self.reason = reason
        super().__init__(f"Structural invariant violated at key {key!r}: {reason}")


class DuplicateKeyError(AcademyIndexError):
    """Raised when a caller requires an insert to succeed but the key is taken."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key already present: {key!r}")


class IdSpaceExhaustedError(AcademyIndexError):
    """Raised when no free id could be drawn within the attempt limit."""

    def __init__(self, attempts: int, upper_bound: int):
        self.attempts = attempts
        self.upper_bound = upper_bound
        super().__init__(
            f"No free id found in [0, {upper_bound}) after {attempts} attempts"
        )
