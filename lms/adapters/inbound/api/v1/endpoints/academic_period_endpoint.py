# lms/adapters/inbound/api/v1/endpoints/academic_period_endpoint.py

from typing import List
from fastapi import APIRouter, Depends

from lms.adapters.inbound.api.deps import get_schedule_use_cases
from lms.application.dtos.schedule_dto import AcademicPeriodOutput, PeriodOptionOutput
from lms.application.use_cases.schedule_use_cases import ScheduleUseCases

router = APIRouter()

OUTSIDE_PERIOD_RESPONSE = {
    404: {
        "description": "No academic period in progress (July and August)",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Currently outside any defined academic semester",
                    "code": "OUTSIDE_ACADEMIC_PERIOD",
                    "errors": {}
                }
            }
        }
    }
}


@router.get(
    "/current",
    response_model=AcademicPeriodOutput,
    summary="Current Period - Semester in progress",
    responses=OUTSIDE_PERIOD_RESPONSE,
)
async def read_current_period(use_cases: ScheduleUseCases = Depends(get_schedule_use_cases)):
    return use_cases.current_period()


@router.get(
    "/next",
    response_model=AcademicPeriodOutput,
    summary="Next Period - Semester following the current one",
    responses=OUTSIDE_PERIOD_RESPONSE,
)
async def read_next_period(use_cases: ScheduleUseCases = Depends(get_schedule_use_cases)):
    return use_cases.next_period()


@router.get(
    "/options",
    response_model=List[PeriodOptionOutput],
    summary="Period Options - Semesters available for group assignment",
    description="Returns the current and the next semester, in that order.",
    responses=OUTSIDE_PERIOD_RESPONSE,
)
async def read_period_options(use_cases: ScheduleUseCases = Depends(get_schedule_use_cases)):
    return use_cases.period_options()
