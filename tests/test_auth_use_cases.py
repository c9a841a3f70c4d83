"""Tests for token revocation use cases."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from lms.adapters.outbound.security.auth_user_manager import UserAuthManager
from lms.application.use_cases.auth_use_cases import AuthUseCases
from lms.domain.exceptions import DatabaseOperationException, InvalidCredentialsException
from lms.shared.utils.clock import utc_now


class TestAuthenticate:

    async def test_valid_token(self, db_session, access_token):
        user = await AuthUseCases(db_session).authenticate(access_token)

        assert user.user_id == "64f1c2a9e4b0a1b2c3d4e5f6"
        assert user.roles == ["student"]
        assert user.token == access_token
        assert user.expires_at > utc_now()

    async def test_logout_revokes_token(self, db_session, access_token):
        use_cases = AuthUseCases(db_session)
        user = await use_cases.authenticate(access_token)

        await use_cases.logout(user)

        with pytest.raises(InvalidCredentialsException) as exc_info:
            await use_cases.authenticate(access_token)
        assert exc_info.value.message == "Token revoked."

    async def test_revoking_other_token_keeps_current_valid(self, db_session, access_token):
        use_cases = AuthUseCases(db_session)
        other = UserAuthManager.create_access_token("someone-else")

        await use_cases.revoke_token(other, "someone-else", utc_now() + timedelta(minutes=5))

        assert (await use_cases.authenticate(access_token)).user_id == "64f1c2a9e4b0a1b2c3d4e5f6"

    async def test_expired_token(self, db_session):
        token = UserAuthManager.create_access_token("user-1", expires_delta=timedelta(minutes=-1))

        with pytest.raises(InvalidCredentialsException):
            await AuthUseCases(db_session).authenticate(token)

    async def test_tampered_token(self, db_session, access_token):
        with pytest.raises(InvalidCredentialsException):
            await AuthUseCases(db_session).authenticate(access_token[:-4] + "abcd")

    async def test_store_failure_is_not_treated_as_valid(self, db_session, access_token):
        repository = AsyncMock()
        repository.is_blacklisted.side_effect = DatabaseOperationException("Error checking token blacklist")

        with pytest.raises(DatabaseOperationException):
            await AuthUseCases(db_session, repository=repository).authenticate(access_token)

    async def test_cleanup_expired(self, db_session, access_token):
        use_cases = AuthUseCases(db_session)
        await use_cases.revoke_token("old-token", "user-1", utc_now() - timedelta(hours=2))
        await use_cases.revoke_token(access_token, "user-1", utc_now() + timedelta(hours=2))

        assert await use_cases.cleanup_expired() == 1
