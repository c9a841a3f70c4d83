# lms/adapters/outbound/persistence/models/token_blacklist.py

"""
Model for the token blacklist.

Stores authentication tokens invalidated before their natural expiry
(logout, password change) so they cannot be reused.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String

from lms.adapters.outbound.persistence.database import Base


class TokenBlacklist(Base):
    """
    Model for revoked tokens.

    Attributes:
        token: The raw bearer token, unique
        user_id: Owner of the token
        blacklisted_at: When the token was revoked (naive UTC)
        expires_at: When the token naturally expires (naive UTC); past
            this moment the entry is ignored and may be purged
    """
    __tablename__ = "token_blacklist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String, unique=True, nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    blacklisted_at = Column(DateTime, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)

    __table_args__ = (
        Index("ix_token_blacklist_token_expires_at", "token", "expires_at"),
    )

    def __repr__(self) -> str:
        return f"<TokenBlacklist(user_id={self.user_id}, expires_at={self.expires_at})>"
