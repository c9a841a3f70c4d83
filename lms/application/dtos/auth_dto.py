# lms/application/dtos/auth_dto.py

from datetime import datetime
from typing import List

from pydantic import Field

from lms.application.dtos.base_dto import CustomBaseModel


class CurrentUser(CustomBaseModel):
    """
    Identity extracted from a valid, non revoked bearer token.
    """
    user_id: str = Field(..., description="User id (token subject).")
    roles: List[str] = Field(default_factory=list, description="Roles granted to the user.")
    expires_at: datetime = Field(..., description="Natural expiry of the token (UTC).")
    token: str = Field(..., exclude=True, description="Raw bearer token.")


class CurrentUserOutput(CustomBaseModel):
    """
    Schema returned by the /user/me endpoint.
    """
    user_id: str
    roles: List[str]
    expires_at: datetime


class LogoutOutput(CustomBaseModel):
    detail: str = Field("Successfully logged out.", description="Result message.")
