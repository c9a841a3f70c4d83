# lms/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model so the metadata is complete whenever
``Base`` is used (table creation, Alembic autogenerate).
"""

from lms.adapters.outbound.persistence.database import Base
from lms.adapters.outbound.persistence.models.token_blacklist import TokenBlacklist

__all__ = [
    "Base",
    "TokenBlacklist",
]
