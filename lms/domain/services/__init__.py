# lms/domain/services/__init__.py

from lms.domain.services.academic_period_service import AcademicPeriodService
from lms.domain.services.schedule_service import ScheduleService

__all__ = ["AcademicPeriodService", "ScheduleService"]
