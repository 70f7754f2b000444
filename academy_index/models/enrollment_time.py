"""
EnrollmentTime - chronological sort key for students.
"""

from dataclasses import dataclass

# February is fixed at 28 days; leap years are not considered.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Check a calendar date the way enrollment accepts it."""
    if year < 1:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, order=True)
class EnrollmentTime:
    """
    Minute-resolution timestamp of a student's enrollment.

    Field order is the comparison order, so instances compare as the tuple
    (year, month, day, hour, minute), which is true chronological order.

    Attributes:
        year: Four digit year.
        month: 1..12.
        day: 1..days in month.
        hour: 0..23.
        minute: 0..59.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    def __post_init__(self) -> None:
        if not is_valid_date(self.day, self.month, self.year):
            raise ValueError(
                f"Invalid date: day={self.day} month={self.month} year={self.year}"
            )
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")

    @classmethod
    def parse(cls, text: str) -> "EnrollmentTime":
        """
        Parse the display format "MM/DD/YYYY HH:MM".

        Args:
            text: The formatted timestamp. Zero padding is optional.

        Returns:
            The parsed EnrollmentTime.

        Raises:
            ValueError: If the string is malformed or the date is invalid.
        """
        try:
            date_part, time_part = text.split()
            month, day, year = (int(p) for p in date_part.split("/"))
            hour, minute = (int(p) for p in time_part.split(":"))
        except ValueError:
            raise ValueError(
                f"Expected enrollment time as 'MM/DD/YYYY HH:MM', got {text!r}"
            ) from None
        return cls(year=year, month=month, day=day, hour=hour, minute=minute)

    def display(self) -> str:
        """Format as zero-padded "MM/DD/YYYY HH:MM"."""
        return (
            f"{self.month:02d}/{self.day:02d}/{self.year} "
            f"{self.hour:02d}:{self.minute:02d}"
        )

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute)

    def __str__(self) -> str:
        return self.display()
