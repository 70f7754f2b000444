"""
Discriminated results for index mutations.
"""

from enum import IntEnum


class InsertResult(IntEnum):
    """Outcome of an insert."""

    INSERTED = 0  # New node created
    DUPLICATE = 1  # Key already present, tree unchanged

    @property
    def inserted(self) -> bool:
        return self == InsertResult.INSERTED


class DeleteResult(IntEnum):
    """Outcome of a delete."""

    REMOVED = 0  # Node found and unlinked
    NOT_FOUND = 1  # Key absent, tree unchanged

    @property
    def removed(self) -> bool:
        return self == DeleteResult.REMOVED
