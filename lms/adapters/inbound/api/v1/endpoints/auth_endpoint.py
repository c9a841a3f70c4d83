# lms/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms.application.use_cases.auth_use_cases import AuthUseCases
from lms.adapters.inbound.api.deps import get_session, get_current_user
from lms.application.dtos.auth_dto import CurrentUser, CurrentUserOutput, LogoutOutput

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/logout",
    response_model=LogoutOutput,
    status_code=status.HTTP_200_OK,
    summary="Logout - Revoke current access token",
    description="Invalidates the current access token by adding it to the blacklist.",
    responses={
        401: {
            "description": "Missing, invalid, expired or already revoked token",
            "content": {
                "application/json": {
                    "example": {"detail": "Token revoked."}
                }
            }
        },
        503: {
            "description": "Token status could not be verified",
            "content": {
                "application/json": {
                    "example": {"detail": "Unable to verify token status."}
                }
            }
        }
    }
)
async def logout_user(
        current_user: CurrentUser = Depends(get_current_user),
        db: AsyncSession = Depends(get_session),
):
    await AuthUseCases(db).logout(current_user)
    return LogoutOutput()


@router.get(
    "/me",
    response_model=CurrentUserOutput,
    summary="Current User - Identity of the bearer token",
    description="Returns the user id, roles and expiry carried by a valid, non revoked token.",
)
async def read_current_user(
        current_user: CurrentUser = Depends(get_current_user),
):
    return CurrentUserOutput(
        user_id=current_user.user_id,
        roles=current_user.roles,
        expires_at=current_user.expires_at,
    )
