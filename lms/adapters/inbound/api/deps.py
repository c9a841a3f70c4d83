# lms/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication and database access.
"""

import logging
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from lms.adapters.outbound.persistence.database import get_db
from lms.application.dtos.auth_dto import CurrentUser
from lms.application.use_cases.auth_use_cases import AuthUseCases
from lms.application.use_cases.schedule_use_cases import ScheduleUseCases
from lms.domain.exceptions import DatabaseOperationException, InvalidCredentialsException

# Configure logger
logger = logging.getLogger(__name__)

# Create bearer scheme for authentication
bearer_scheme = HTTPBearer(auto_error=False)

# Alias for get_db
get_session = get_db


########################################################################
# User Token Authentication
########################################################################

async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
        db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """
    Get the current user from the bearer token.

    Args:
        credentials: Authorization credentials with bearer token
        db: Async database session

    Returns:
        Identity carried by the token

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired or
            revoked; 503 if the blacklist cannot be checked
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await AuthUseCases(db).authenticate(credentials.credentials)

    except InvalidCredentialsException as e:
        logger.warning(f"Authentication rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    except DatabaseOperationException as e:
        # Fail closed: an unknown revocation status denies access
        logger.error(f"Could not verify token revocation status: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to verify token status.",
        )


########################################################################
# Use cases
########################################################################

def get_schedule_use_cases() -> ScheduleUseCases:
    return ScheduleUseCases()
