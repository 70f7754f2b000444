"""
Student record stored in the enrollment index.
"""

from dataclasses import dataclass

from academy_index.models.dance_style import DanceStyle
from academy_index.models.enrollment_time import EnrollmentTime

MAX_PREFERENCES = 3


@dataclass
class Student:
    """
    A student enrolled at the academy.

    Attributes:
        id: Four digit identifier, unique among students.
        full_name: "Firstname Lastname".
        enrolled_at: When the student enrolled; this is the index key.
        preferences: One to three distinct dance styles.
    """

    id: int
    full_name: str
    enrolled_at: EnrollmentTime
    preferences: tuple[DanceStyle, ...]

    def __post_init__(self) -> None:
        self.preferences = tuple(
            DanceStyle.parse(style) if isinstance(style, str) else DanceStyle(style)
            for style in self.preferences
        )
        if not self.preferences:
            raise ValueError("At least one preference is required")
        if len(self.preferences) > MAX_PREFERENCES:
            raise ValueError(
                f"At most {MAX_PREFERENCES} preferences allowed, got {len(self.preferences)}"
            )
        if len(set(self.preferences)) != len(self.preferences):
            raise ValueError(f"Duplicate preferences: {self.preferences}")

    @property
    def sort_key(self) -> EnrollmentTime:
        return self.enrolled_at

    def preferences_string(self) -> str:
        """Preferences joined with '|', e.g. "Salsa|Tango"."""
        return "|".join(style.label for style in self.preferences)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.full_name}, "
            f"Enrolled: {self.enrolled_at.display()}, "
            f"Preferences: {self.preferences_string()}"
        )
