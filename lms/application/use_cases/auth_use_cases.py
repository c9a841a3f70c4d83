# lms/application/use_cases/auth_use_cases.py

"""
Use cases for token revocation.

Logout and forced invalidation (e.g. after a password change) both add
the token to the blacklist; authentication rejects blacklisted tokens.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from lms.adapters.outbound.persistence.repositories.token_repository import token_repository
from lms.adapters.outbound.security.auth_user_manager import UserAuthManager
from lms.application.dtos.auth_dto import CurrentUser
from lms.application.ports.outbound import ITokenBlacklistRepository
from lms.domain.exceptions import InvalidCredentialsException
from lms.shared.utils.clock import from_timestamp

logger = logging.getLogger(__name__)


class AuthUseCases:
    """
    Token revocation service.

    Storage failures are never interpreted as "not revoked": they propagate
    as DatabaseOperationException so callers deny access.
    """

    def __init__(self, db_session: AsyncSession, repository: Optional[ITokenBlacklistRepository] = None):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active SQLAlchemy session
            repository: Blacklist store, defaults to the SQLAlchemy one
        """
        self.db = db_session
        self.repository = repository or token_repository

    async def authenticate(self, token: str) -> CurrentUser:
        """
        Decode a bearer token and make sure it was not revoked.

        Raises:
            InvalidCredentialsException: Invalid, expired or revoked token
            DatabaseOperationException: The blacklist could not be queried
        """
        payload = UserAuthManager.decode_access_token(token)
        await self.ensure_not_revoked(token)
        return CurrentUser(
            user_id=payload["sub"],
            roles=payload.get("roles", []),
            expires_at=from_timestamp(payload["exp"]),
            token=token,
        )

    async def ensure_not_revoked(self, token: str) -> None:
        if await self.repository.is_blacklisted(self.db, token):
            logger.warning("Rejected revoked token")
            raise InvalidCredentialsException(detail="Token revoked.")

    async def logout(self, current_user: CurrentUser) -> None:
        """Revoke the token the current user authenticated with."""
        await self.revoke_token(current_user.token, current_user.user_id, current_user.expires_at)
        logger.info(f"User {current_user.user_id} logged out")

    async def revoke_token(self, token: str, user_id: str, expires_at: datetime) -> None:
        """
        Revoke a token before its natural expiry.

        Used by logout and by forced invalidation flows such as a password
        change. Revoking twice is harmless.
        """
        await self.repository.blacklist(self.db, token, user_id, expires_at)

    async def cleanup_expired(self) -> int:
        deleted = await self.repository.cleanup_expired(self.db)
        logger.info(f"Cleaned up {deleted} expired tokens from blacklist")
        return deleted
