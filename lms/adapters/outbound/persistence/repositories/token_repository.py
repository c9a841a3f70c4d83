# lms/adapters/outbound/persistence/repositories/token_repository.py

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lms.adapters.outbound.persistence.models.token_blacklist import TokenBlacklist
from lms.application.ports.outbound import ITokenBlacklistRepository
from lms.domain.exceptions import DatabaseOperationException
from lms.domain.models.token_domain_model import BlacklistedToken
from lms.shared.utils.clock import to_naive_utc, utc_now

logger = logging.getLogger(__name__)


class AsyncTokenRepository(ITokenBlacklistRepository):
    """
    Repository for the token blacklist.

    The backing table has no native expiry: entries whose ``expires_at``
    has been reached are ignored by lookups and removed by
    ``cleanup_expired``.
    """

    async def is_blacklisted(self, db: AsyncSession, token: str) -> bool:
        """
        Check if a token is in the blacklist.

        Args:
            db: Async database session
            token: Raw token to check

        Returns:
            True if an unexpired entry exists for the token

        Raises:
            DatabaseOperationException: If the lookup fails. A failed lookup
                never means "not blacklisted".
        """
        try:
            query = select(TokenBlacklist.id).where(
                TokenBlacklist.token == token,
                TokenBlacklist.expires_at > utc_now(),
            )
            result = await db.execute(query)
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking token blacklist: {e}")
            raise DatabaseOperationException(
                detail="Error checking token blacklist",
                original_error=e
            )

    async def blacklist(
            self,
            db: AsyncSession,
            token: str,
            user_id: str,
            expires_at: datetime,
    ) -> None:
        """
        Add a token to the blacklist.

        Blacklisting a token that is already present succeeds silently.

        Args:
            db: Async database session
            token: Raw token to revoke
            user_id: Owner of the token
            expires_at: When the token naturally expires

        Raises:
            DatabaseOperationException: On any storage error other than a
                duplicate token
        """
        try:
            entry = TokenBlacklist(
                token=token,
                user_id=str(user_id),
                blacklisted_at=utc_now(),
                expires_at=to_naive_utc(expires_at),
            )
            db.add(entry)
            await db.commit()
            logger.info(f"Token revoked for user {user_id}")
        except IntegrityError:
            await db.rollback()
            logger.debug(f"Token for user {user_id} already blacklisted")
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error adding token to blacklist: {e}")
            raise DatabaseOperationException(
                detail="Error adding token to blacklist",
                original_error=e
            )

    async def get_entry(self, db: AsyncSession, token: str) -> Optional[BlacklistedToken]:
        """
        Get the blacklist entry of a token, ignoring expiry.

        Returns:
            The entry as a domain object, or None
        """
        try:
            query = select(TokenBlacklist).where(TokenBlacklist.token == token)
            result = await db.execute(query)
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                detail="Error reading token blacklist",
                original_error=e
            )

        if row is None:
            return None
        return BlacklistedToken(
            token=row.token,
            user_id=row.user_id,
            expires_at=row.expires_at,
            blacklisted_at=row.blacklisted_at,
        )

    async def cleanup_expired(self, db: AsyncSession) -> int:
        """
        Remove expired tokens from the blacklist to keep the table small.

        Args:
            db: Async database session

        Returns:
            Number of records deleted
        """
        try:
            query = delete(TokenBlacklist).where(TokenBlacklist.expires_at <= utc_now())
            result = await db.execute(query)
            await db.commit()
            count = result.rowcount or 0
            logger.debug(f"Removed {count} expired blacklist entries")
            return count
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error cleaning up expired blacklisted tokens: {e}")
            raise DatabaseOperationException(
                detail="Error cleaning up expired blacklisted tokens",
                original_error=e
            )


# Create instance
token_repository = AsyncTokenRepository()
