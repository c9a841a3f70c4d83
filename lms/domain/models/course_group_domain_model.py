# lms/domain/models/course_group_domain_model.py

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from lms.domain.exceptions import InvalidInputException, InvalidTimeFormatException
from lms.domain.models.academic_period_domain_model import (
    AcademicPeriod,
    parse_year_range,
    validate_semester,
)

# Zero padded 24h clock, e.g. "09:05" or "23:59"
TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):([0-5]\d)")


class Weekday(str, Enum):
    """Lowercase English weekday names, in ``datetime.weekday()`` order."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def position(self) -> int:
        """Position in the week, 0 = monday ... 6 = sunday."""
        return _WEEKDAY_POSITIONS[self]

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Weekday":
        return _WEEK[moment.weekday()]

    @classmethod
    def parse(cls, value: Any) -> "Weekday":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputException(
                "Invalid day",
                fields={"day": str(value)}
            )


_WEEK = tuple(Weekday)
_WEEKDAY_POSITIONS = {day: position for position, day in enumerate(_WEEK)}


def parse_time(value: Any, field_name: str = "time") -> tuple:
    """
    Split an ``HH:MM`` string into ``(hours, minutes)``.

    Raises:
        InvalidTimeFormatException: If the value is not zero padded 24h time
    """
    match = TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormatException(value, field=field_name)
    return int(match.group(1)), int(match.group(2))


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M")


@dataclass(frozen=True)
class WeeklySlot:
    """
    Recurring weekly time window of a course group.

    ``from_time`` and ``to_time`` are kept as ``HH:MM`` strings: the zero
    padded format makes lexicographic comparison chronological.
    ``ref`` is an opaque payload (usually the course group id) returned
    untouched by the classifier.
    """
    day: Weekday
    from_time: str
    to_time: str
    semester: int
    year: str
    ref: Optional[Any] = field(default=None, compare=False)

    def __post_init__(self):
        parse_time(self.from_time, "from")
        parse_time(self.to_time, "to")
        object.__setattr__(self, "day", Weekday.parse(self.day))
        if self.from_time >= self.to_time:
            raise InvalidInputException(
                "Slot start must be before its end",
                fields={"from": self.from_time, "to": self.to_time}
            )
        validate_semester(self.semester)
        parse_year_range(self.year)

    @property
    def start(self) -> tuple:
        return parse_time(self.from_time, "from")

    def belongs_to(self, period: AcademicPeriod) -> bool:
        return self.semester == period.semester and self.year == period.year


@dataclass
class ScheduleBuckets:
    """Result of classifying slots against a moment in time."""
    current: List[WeeklySlot] = field(default_factory=list)
    upcoming: List[WeeklySlot] = field(default_factory=list)
    other: List[WeeklySlot] = field(default_factory=list)
