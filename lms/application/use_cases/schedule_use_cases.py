# lms/application/use_cases/schedule_use_cases.py

"""
Use cases for academic periods and course group schedules.

This module resolves the current academic period from the clock and
classifies course group slots for dashboards and course pages.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from lms.application.dtos.schedule_dto import (
    AcademicPeriodOutput,
    CategorizeOutput,
    PeriodOptionOutput,
    SlotInput,
    SlotOutput,
    UpcomingSlotOutput,
)
from lms.domain.exceptions import OutsideAcademicPeriodException
from lms.domain.models.course_group_domain_model import WeeklySlot
from lms.domain.services.academic_period_service import AcademicPeriodService
from lms.domain.services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)


class ScheduleUseCases:
    """
    Schedule service.

    Wraps the pure domain services with a clock and converts between
    dtos and domain objects.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            clock: Returns the current local time
        """
        self.clock = clock

    def _resolve_now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.clock()

    def current_period(self, now: Optional[datetime] = None) -> AcademicPeriodOutput:
        """
        Raises:
            OutsideAcademicPeriodException: In July and August
        """
        period = AcademicPeriodService.current_period(self._resolve_now(now))
        return AcademicPeriodOutput.from_domain(period)

    def next_period(self, now: Optional[datetime] = None) -> AcademicPeriodOutput:
        current = AcademicPeriodService.current_period(self._resolve_now(now))
        return AcademicPeriodOutput.from_domain(AcademicPeriodService.next_period(current))

    def period_options(self, now: Optional[datetime] = None) -> List[PeriodOptionOutput]:
        options = AcademicPeriodService.period_options(self._resolve_now(now))
        return [PeriodOptionOutput(**option) for option in options]

    def categorize(self, slots: Iterable[SlotInput], now: Optional[datetime] = None) -> CategorizeOutput:
        """
        Classify slots as current, upcoming or other.

        Outside any academic period no slot can be current or upcoming:
        semester filtering is disabled and every slot lands in ``other``.

        Raises:
            InvalidTimeFormatException: If a slot time is not HH:MM
            InvalidInputException: If a slot is otherwise malformed
        """
        moment = self._resolve_now(now)
        domain_slots: List[WeeklySlot] = [slot.to_domain() for slot in slots]

        try:
            period = AcademicPeriodService.current_period(moment)
        except OutsideAcademicPeriodException:
            logger.info(f"No academic period at {moment.isoformat()}, {len(domain_slots)} slots left unclassified")
            return CategorizeOutput(
                period=None,
                other=[SlotOutput.from_domain(slot) for slot in domain_slots],
            )

        buckets = ScheduleService.categorize(moment, domain_slots, period)
        logger.debug(
            f"Categorized {len(domain_slots)} slots for {period.label}: "
            f"{len(buckets.current)} current, {len(buckets.upcoming)} upcoming, {len(buckets.other)} other"
        )

        return CategorizeOutput(
            period=AcademicPeriodOutput.from_domain(period),
            current=[SlotOutput.from_domain(slot) for slot in buckets.current],
            upcoming=[UpcomingSlotOutput.from_upcoming(slot, moment) for slot in buckets.upcoming],
            other=[SlotOutput.from_domain(slot) for slot in buckets.other],
        )
