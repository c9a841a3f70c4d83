# lms/adapters/inbound/api/v1/endpoints/schedule_endpoint.py

from fastapi import APIRouter, Depends

from lms.adapters.inbound.api.deps import get_schedule_use_cases
from lms.application.dtos.schedule_dto import CategorizeOutput, CategorizeRequest
from lms.application.use_cases.schedule_use_cases import ScheduleUseCases

router = APIRouter()


@router.post(
    "/categorize",
    response_model=CategorizeOutput,
    summary="Categorize - Split course group slots by status",
    description="""
    Classifies weekly course group slots against the current time:

    - **current**: today, within [from, to] (both ends inclusive)
    - **upcoming**: later today or later this week, sorted by next occurrence
    - **other**: everything else, including slots of another semester

    Outside any academic period (July and August) every slot is returned in `other`.
    """,
    responses={
        400: {
            "description": "Malformed slot",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid time format for 'from': '9:00' (expected HH:MM)",
                        "code": "INVALID_TIME_FORMAT",
                        "errors": {"from": "9:00"}
                    }
                }
            }
        }
    }
)
async def categorize_slots(
        request: CategorizeRequest,
        use_cases: ScheduleUseCases = Depends(get_schedule_use_cases),
):
    return use_cases.categorize(request.slots, now=request.now)
