"""
Instructor record and payroll arithmetic.
"""

from dataclasses import dataclass

from academy_index.models.dance_style import DanceStyle


@dataclass
class Instructor:
    """
    An instructor employed by the academy.

    Attributes:
        id: Unique identifier; this is the index key.
        full_name: "Firstname Lastname".
        start_year: Year the instructor joined.
        base_salary: Monthly base salary.
        dance_style: The style the instructor teaches.
    """

    # Payroll constants
    SENIORITY_BONUS = 24350.0
    SENIORITY_YEARS = 5
    POPULARITY_RATE = 0.05
    TANGO_BONUS = 5600.0
    PENSION_RATE = 0.19

    id: int
    full_name: str
    start_year: int
    base_salary: float
    dance_style: DanceStyle

    def __post_init__(self) -> None:
        if isinstance(self.dance_style, str):
            self.dance_style = DanceStyle.parse(self.dance_style)
        if self.base_salary < 0:
            raise ValueError(f"base_salary must be >= 0, got {self.base_salary}")

    @property
    def sort_key(self) -> int:
        return self.id

    def years_of_service(self, current_year: int) -> int:
        return current_year - self.start_year

    def has_seniority(self, current_year: int) -> bool:
        return self.years_of_service(current_year) > self.SENIORITY_YEARS

    def teaches_tango(self) -> bool:
        return self.dance_style == DanceStyle.TANGO

    def gross_salary(self, current_year: int, teaches_most_popular: bool) -> float:
        """
        Base salary plus bonuses.

        Args:
            current_year: Year used to compute seniority.
            teaches_most_popular: Whether this instructor's style is the one
                students prefer most.

        Returns:
            Gross monthly salary.
        """
        gross = self.base_salary
        if self.has_seniority(current_year):
            gross += self.SENIORITY_BONUS
        if teaches_most_popular:
            gross += self.base_salary * self.POPULARITY_RATE
        if self.teaches_tango():
            gross += self.TANGO_BONUS
        return gross

    def pension_contribution(self, gross: float) -> float:
        return gross * self.PENSION_RATE

    def net_salary(self, gross: float) -> float:
        return gross - self.pension_contribution(gross)

    def days_worked(self, current_year: int, day_of_year: int) -> int:
        """Approximate days worked: full years plus one leap day per four years.

        Service shorter than one full year counts only `day_of_year`.
        """
        full_years = max(current_year - self.start_year - 1, 0)
        return full_years * 365 + full_years // 4 + day_of_year

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.full_name}, Start year: {self.start_year}, "
            f"Base salary: ${self.base_salary:.0f}, Style: {self.dance_style.label}"
        )


@dataclass(frozen=True)
class PayrollEntry:
    """One instructor's line in a payroll run."""

    instructor_id: int
    full_name: str
    gross: float
    pension: float
    net: float
