# lms/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from lms.adapters.inbound.api.v1.endpoints import (
    academic_period_endpoint,
    auth_endpoint,
    schedule_endpoint,
)

api_router = APIRouter()

# Include the endpoint routers
api_router.include_router(auth_endpoint.router, prefix="/user", tags=["User"])
api_router.include_router(academic_period_endpoint.router, prefix="/academic-period", tags=["Academic Period"])
api_router.include_router(schedule_endpoint.router, prefix="/schedule", tags=["Schedule"])
