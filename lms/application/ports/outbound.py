# lms/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from lms.domain.models.token_domain_model import BlacklistedToken


class ITokenBlacklistRepository(ABC):
    """Token blacklist storage interface."""

    @abstractmethod
    async def is_blacklisted(self, db: Any, token: str) -> bool:
        """Check whether the token is revoked and not yet expired."""
        pass

    @abstractmethod
    async def blacklist(self, db: Any, token: str, user_id: str, expires_at: datetime) -> None:
        """Revoke a token. Revoking an already revoked token is a no-op."""
        pass

    @abstractmethod
    async def get_entry(self, db: Any, token: str) -> Optional[BlacklistedToken]:
        """Get the blacklist entry of a token, expired or not."""
        pass

    @abstractmethod
    async def cleanup_expired(self, db: Any) -> int:
        """Delete expired entries and return how many were removed."""
        pass
