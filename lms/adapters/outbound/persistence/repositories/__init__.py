# lms/adapters/outbound/persistence/repositories/__init__.py

from lms.adapters.outbound.persistence.repositories.token_repository import (
    AsyncTokenRepository,
    token_repository,
)

__all__ = ["AsyncTokenRepository", "token_repository"]
