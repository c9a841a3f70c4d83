# lms/application/use_cases/__init__.py

from lms.application.use_cases.auth_use_cases import AuthUseCases
from lms.application.use_cases.schedule_use_cases import ScheduleUseCases

__all__ = ["AuthUseCases", "ScheduleUseCases"]
