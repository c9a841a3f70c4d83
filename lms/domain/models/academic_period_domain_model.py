# lms/domain/models/academic_period_domain_model.py

import re
from dataclasses import dataclass

from lms.domain.exceptions import InvalidInputException

YEAR_RANGE_PATTERN = re.compile(r"(\d{4})-(\d{4})")
SEMESTERS = (1, 2)


def parse_year_range(year: str) -> int:
    """
    Validate a ``"STARTYEAR-ENDYEAR"`` label and return its start year.

    Raises:
        InvalidInputException: If the label is malformed or the two years
            are not consecutive
    """
    match = YEAR_RANGE_PATTERN.fullmatch(year) if isinstance(year, str) else None
    if not match:
        raise InvalidInputException(
            "Year must be in YYYY-YYYY format",
            fields={"year": str(year)}
        )
    start, end = int(match.group(1)), int(match.group(2))
    if end != start + 1:
        raise InvalidInputException(
            "Year range must span two consecutive years",
            fields={"year": year}
        )
    return start


def validate_semester(semester: int) -> int:
    if isinstance(semester, bool) or semester not in SEMESTERS:
        raise InvalidInputException(
            "Semester must be 1 or 2",
            fields={"semester": str(semester)}
        )
    return semester


def format_year_range(start_year: int) -> str:
    return f"{start_year}-{start_year + 1}"


@dataclass(frozen=True)
class AcademicPeriod:
    """Domain model for one half of an academic year."""
    year: str
    semester: int

    def __post_init__(self):
        parse_year_range(self.year)
        validate_semester(self.semester)

    @property
    def start_year(self) -> int:
        return parse_year_range(self.year)

    @property
    def label(self) -> str:
        return f"{self.year} S{self.semester}"

    @classmethod
    def from_start_year(cls, start_year: int, semester: int) -> "AcademicPeriod":
        return cls(year=format_year_range(start_year), semester=semester)
