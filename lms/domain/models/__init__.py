# lms/domain/models/__init__.py

from lms.domain.models.academic_period_domain_model import AcademicPeriod
from lms.domain.models.course_group_domain_model import ScheduleBuckets, Weekday, WeeklySlot
from lms.domain.models.token_domain_model import BlacklistedToken

__all__ = [
    "AcademicPeriod",
    "BlacklistedToken",
    "ScheduleBuckets",
    "Weekday",
    "WeeklySlot",
]
