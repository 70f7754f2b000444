"""
Academy - owns the student and instructor indexes and drives them.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from academy_index.academy.id_generator import IdGenerator
from academy_index.models.dance_style import DanceStyle
from academy_index.models.enrollment_time import EnrollmentTime, is_valid_date
from academy_index.models.exceptions import DuplicateKeyError
from academy_index.models.instructor import Instructor, PayrollEntry
from academy_index.models.results import DeleteResult, InsertResult
from academy_index.models.student import Student
from academy_index.models.trees import AVLTree, BinarySearchTree
from academy_index.models.validation import parse_month, validate_full_name


class Academy:
    """
    Dance academy registry.

    Provides:
    - enroll_student(...): Validate input, allocate an id, index by enrollment time
    - add_student / add_instructor: Insert already-built records
    - find_instructor(id, visitor): Lookup with per-node observation
    - remove_instructor(id): Delete from the instructor index
    - payroll(): Salary breakdown for every instructor

    Architecture:
    - Students live in an AVLTree keyed by enrollment time
    - Instructors live in a BinarySearchTree keyed by id
    - The two indexes share nothing
    """

    # Student ids have this many digits
    DEFAULT_ID_DIGITS = 4

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize an empty academy.

        Args:
            id_generator: Allocator for new student ids.
            clock: Returns the current time; used for default years.
        """
        self._students = AVLTree()
        self._instructors = BinarySearchTree()
        self._id_generator = id_generator or IdGenerator(digits=self.DEFAULT_ID_DIGITS)
        self._clock = clock

    @property
    def student_index(self) -> AVLTree:
        return self._students

    @property
    def instructor_index(self) -> BinarySearchTree:
        return self._instructors

    # Students

    def add_student(self, student: Student) -> InsertResult:
        """Insert a fully built student, e.g. one loaded from storage."""
        return self._students.insert(student)

    def enroll_student(
        self,
        full_name: str,
        day: int,
        month: int | str,
        hour: int,
        minute: int,
        preferences: list[int],
        year: int | None = None,
    ) -> Student:
        """
        Validate enrollment input and index a new student.

        Args:
            full_name: "Firstname Lastname".
            day: Day of month.
            month: Month number or Spanish month name.
            hour: 0..23.
            minute: 0..59.
            preferences: Menu numbers 1..5; repeats and out-of-range values
                are dropped and at most three are kept.
            year: Enrollment year, the current year if omitted.

        Returns:
            The new Student.

        Raises:
            ValueError: If any field is invalid.
            DuplicateKeyError: If another student enrolled at the same minute.
            IdSpaceExhaustedError: If no free student id could be drawn.
        """
        if not validate_full_name(full_name):
            raise ValueError(f"Invalid full name: {full_name!r}")

        if year is None:
            year = self._clock().year
        month_number = parse_month(month)
        if not is_valid_date(day, month_number, year):
            raise ValueError(f"Invalid date: day={day} month={month!r} year={year}")

        styles = DanceStyle.from_menu_choices(preferences)
        if not styles:
            raise ValueError(f"No valid preferences in {preferences!r}")

        enrolled_at = EnrollmentTime(
            year=year, month=month_number, day=day, hour=hour, minute=minute
        )
        if self._students.has(enrolled_at):
            raise DuplicateKeyError(enrolled_at)

        student_id = self._id_generator.generate(self.student_id_exists)
        student = Student(
            id=student_id,
            full_name=full_name,
            enrolled_at=enrolled_at,
            preferences=styles,
        )
        self._students.insert(student)
        logging.info(f"Enrolled student {student_id} at {enrolled_at}")
        return student

    def students(self) -> Iterator[Student]:
        """Students in enrollment order."""
        return self._students.traverse_in_order()

    def student_id_exists(self, student_id: int) -> bool:
        # The student index is keyed by time, so ids need a full scan
        return any(student.id == student_id for student in self._students)

    # Instructors

    def add_instructor(self, instructor: Instructor) -> InsertResult:
        return self._instructors.insert(instructor)

    def instructors(self) -> Iterator[Instructor]:
        """Instructors in ascending id order."""
        return self._instructors.traverse_in_order()

    def instructor_id_exists(self, instructor_id: int) -> bool:
        return self._instructors.has(instructor_id)

    def find_instructor(
        self,
        instructor_id: int,
        visitor: Callable[[Instructor], None] | None = None,
    ) -> Instructor | None:
        """
        Look up an instructor by id.

        Args:
            instructor_id: The id to find.
            visitor: Called with each instructor examined on the search path.

        Returns:
            The Instructor if found, None otherwise.
        """
        return self._instructors.find(instructor_id, visitor)

    def remove_instructor(self, instructor_id: int) -> DeleteResult:
        result = self._instructors.delete(instructor_id)
        if result.removed:
            logging.info(f"Removed instructor {instructor_id}")
        else:
            logging.warning(f"Instructor {instructor_id} not found; nothing removed")
        return result

    # Reports

    def style_counts(self) -> dict[DanceStyle, int]:
        """Number of students listing each style among their preferences."""
        counts = {style: 0 for style in DanceStyle}
        for student in self._students:
            for style in student.preferences:
                counts[style] += 1
        return counts

    def most_popular_style(self) -> DanceStyle:
        """Style with the most student preferences; ties go to the lowest number."""
        counts = self.style_counts()
        best = DanceStyle.BACHATA
        for style in DanceStyle:
            if counts[style] > counts[best]:
                best = style
        return best

    def payroll(self, current_year: int | None = None) -> list[PayrollEntry]:
        """
        Compute salaries for every instructor.

        Args:
            current_year: Year used for seniority, the current year if omitted.

        Returns:
            One PayrollEntry per instructor, in ascending id order.
        """
        if current_year is None:
            current_year = self._clock().year
        popular = self.most_popular_style()

        entries = []
        for instructor in self._instructors:
            gross = instructor.gross_salary(
                current_year, instructor.dance_style == popular
            )
            entries.append(
                PayrollEntry(
                    instructor_id=instructor.id,
                    full_name=instructor.full_name,
                    gross=gross,
                    pension=instructor.pension_contribution(gross),
                    net=instructor.net_salary(gross),
                )
            )
        return entries

    def instructor_days_worked(self, instructor_id: int) -> int | None:
        """Days worked up to today, or None if the instructor is unknown."""
        instructor = self._instructors.find(instructor_id)
        if instructor is None:
            return None
        today = self._clock()
        return instructor.days_worked(today.year, today.timetuple().tm_yday)
