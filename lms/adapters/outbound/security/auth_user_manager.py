# lms/adapters/outbound/security/auth_user_manager.py

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from lms.adapters.configuration.config import settings
from lms.domain.exceptions import InvalidCredentialsException

DEFAULT_EXPIRES_MIN = settings.ACCESS_TOKEN_USER_EXPIRE_MINUTOS


class UserAuthManager:
    """
    JWT authentication manager for users.
    """

    @classmethod
    def create_access_token(
            cls,
            subject: str,
            roles: Optional[List[str]] = None,
            expires_delta: timedelta = None,
    ) -> str:
        """
        Create a JWT access token for an authenticated user.

        - subject: the user id.
        - roles: subset of "student", "teacher", "admin".
        - expires_delta: custom expiration time.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=DEFAULT_EXPIRES_MIN)

        expire = datetime.now(timezone.utc) + expires_delta

        payload = {
            "sub": str(subject),
            "exp": int(expire.timestamp()),
            "type": "user",
            "roles": list(roles or []),
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @classmethod
    def decode_access_token(cls, token: str) -> dict:
        """
        Verify the signature and expiry of an access token.

        Revocation is not checked here; see AuthUseCases.authenticate.

        Raises:
            InvalidCredentialsException: If the token is invalid, expired or
                not a user token
        """
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except ExpiredSignatureError:
            raise InvalidCredentialsException(detail="Your token has expired. Please log in again.")
        except JWTError:
            raise InvalidCredentialsException(detail="Invalid token. Please log in again.")

        if payload.get("type") != "user" or not payload.get("sub") or "exp" not in payload:
            raise InvalidCredentialsException(detail="Invalid token: incorrect type.")

        return payload
