# lms/domain/models/token_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class BlacklistedToken:
    """Domain model for an authentication token invalidated before its expiry."""
    token: str
    user_id: str
    expires_at: datetime
    blacklisted_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """An entry stops counting as blacklisted once ``expires_at`` is reached."""
        return self.expires_at <= now
