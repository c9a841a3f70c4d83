# lms/domain/services/academic_period_service.py

from datetime import datetime
from typing import Any, Dict, List

from lms.domain.exceptions import OutsideAcademicPeriodException
from lms.domain.models.academic_period_domain_model import AcademicPeriod, validate_semester

SEMESTER_DESCRIPTIONS = {
    1: "September - January",
    2: "February - June",
}


class AcademicPeriodService:
    """
    Domain service that resolves academic periods from wall-clock time.

    An academic year spans two calendar years: semester 1 runs from
    September to January, semester 2 from February to June. July and
    August belong to no period.
    """

    @staticmethod
    def current_period(now: datetime) -> AcademicPeriod:
        """
        Return the academic period ``now`` falls in.

        Args:
            now: Moment to evaluate

        Returns:
            The matching AcademicPeriod

        Raises:
            OutsideAcademicPeriodException: If ``now`` is in July or August
        """
        year = now.year
        month = now.month - 1  # 0 = January ... 11 = December

        if month >= 8 or month == 0:
            semester = 1
            start_year = year if month >= 8 else year - 1
        elif 0 < month < 6:
            semester = 2
            start_year = year - 1
        else:
            raise OutsideAcademicPeriodException()

        return AcademicPeriod.from_start_year(start_year, semester)

    @staticmethod
    def next_period(period: AcademicPeriod) -> AcademicPeriod:
        """Return the semester following ``period``."""
        if period.semester == 1:
            return AcademicPeriod(year=period.year, semester=2)
        return AcademicPeriod.from_start_year(period.start_year + 1, 1)

    @staticmethod
    def semester_description(semester: int) -> str:
        return SEMESTER_DESCRIPTIONS[validate_semester(semester)]

    @classmethod
    def period_options(cls, now: datetime) -> List[Dict[str, Any]]:
        """
        Build the semester choices offered when assigning a user to a group.

        Returns:
            Two entries, the current semester then the next one
        """
        current = cls.current_period(now)
        upcoming = cls.next_period(current)

        options = []
        for prefix, period in (("Current", current), ("Next", upcoming)):
            options.append({
                "value": f"{period.semester}-{period.year}",
                "label": f"{prefix} Semester ({period.label})",
                "description": cls.semester_description(period.semester),
                "year": period.year,
                "semester": period.semester,
            })
        return options
