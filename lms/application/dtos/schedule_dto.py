# lms/application/dtos/schedule_dto.py

"""
Schemas for academic periods and course group schedules.

Slot times are accepted as plain strings: the domain model validates
them and reports malformed values as INVALID_TIME_FORMAT.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from lms.application.dtos.base_dto import CustomBaseModel
from lms.domain.models.academic_period_domain_model import AcademicPeriod
from lms.domain.models.course_group_domain_model import WeeklySlot
from lms.domain.services.academic_period_service import AcademicPeriodService
from lms.domain.services.schedule_service import ScheduleService


class AcademicPeriodOutput(CustomBaseModel):
    """
    Schema for an academic period.
    """
    year: str = Field(..., description="Academic year, e.g. 2024-2025.")
    semester: int = Field(..., description="Semester, 1 or 2.")
    label: str = Field(..., description="Short label, e.g. 2024-2025 S1.")
    description: str = Field(..., description="Months covered by the semester.")

    @classmethod
    def from_domain(cls, period: AcademicPeriod) -> "AcademicPeriodOutput":
        return cls(
            year=period.year,
            semester=period.semester,
            label=period.label,
            description=AcademicPeriodService.semester_description(period.semester),
        )


class PeriodOptionOutput(CustomBaseModel):
    """
    Semester choice offered when assigning a user to a course group.
    """
    value: str = Field(..., description="Option key, '<semester>-<year>'.")
    label: str
    description: str
    year: str
    semester: int


class SlotInput(CustomBaseModel):
    """
    Weekly schedule of a course group.
    """
    day: str = Field(..., description="Lowercase English weekday name.")
    from_time: str = Field(..., alias="from", description="Start time, HH:MM (24h).")
    to_time: str = Field(..., alias="to", description="End time, HH:MM (24h).")
    semester: int = Field(..., description="Semester, 1 or 2.")
    year: str = Field(..., description="Academic year, YYYY-YYYY.")
    ref: Optional[Union[int, str]] = Field(None, description="Caller reference, e.g. the group id.")

    def to_domain(self) -> WeeklySlot:
        return WeeklySlot(**self.model_dump())


class CategorizeRequest(CustomBaseModel):
    """
    Slots to classify, optionally against a given moment instead of now.
    """
    slots: List[SlotInput] = Field(default_factory=list)
    now: Optional[datetime] = Field(None, description="Moment to evaluate; defaults to the server time.")


class SlotOutput(CustomBaseModel):
    day: str
    from_time: str = Field(..., alias="from")
    to_time: str = Field(..., alias="to")
    semester: int
    year: str
    ref: Optional[Union[int, str]] = None
    description: str

    @classmethod
    def from_domain(cls, slot: WeeklySlot) -> "SlotOutput":
        return cls(
            day=slot.day.value,
            from_time=slot.from_time,
            to_time=slot.to_time,
            semester=slot.semester,
            year=slot.year,
            ref=slot.ref,
            description=ScheduleService.describe(slot),
        )


class UpcomingSlotOutput(SlotOutput):
    next_occurrence: datetime
    time_until: str

    @classmethod
    def from_upcoming(cls, slot: WeeklySlot, now: datetime) -> "UpcomingSlotOutput":
        return cls(
            **SlotOutput.from_domain(slot).model_dump(),
            next_occurrence=ScheduleService.next_occurrence(now, slot),
            time_until=ScheduleService.time_until(now, slot),
        )


class CategorizeOutput(CustomBaseModel):
    """
    Classification result. ``period`` is null outside any academic period,
    in which case every slot is in ``other``.
    """
    period: Optional[AcademicPeriodOutput] = None
    current: List[SlotOutput] = Field(default_factory=list)
    upcoming: List[UpcomingSlotOutput] = Field(default_factory=list)
    other: List[SlotOutput] = Field(default_factory=list)
