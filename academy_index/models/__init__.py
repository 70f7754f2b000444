"""
Data models for the academy indexes.
"""

from academy_index.models.dance_style import DanceStyle
from academy_index.models.enrollment_time import EnrollmentTime
from academy_index.models.instructor import Instructor, PayrollEntry
from academy_index.models.results import DeleteResult, InsertResult
from academy_index.models.student import Student

__all__ = [
    "DanceStyle",
    "EnrollmentTime",
    "Instructor",
    "PayrollEntry",
    "DeleteResult",
    "InsertResult",
    "Student",
]
