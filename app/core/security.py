"""Bearer-token verification for tokens issued by the external identity provider.

This service never issues tokens or handles sign-in; it only checks that a
request carries a valid access token and exposes who the caller is.
"""

import logging

from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import settings
from app.core.exceptions import UnauthorizedError
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_access_token(token: str) -> CurrentUser:
    """Verify signature, expiry and audience; return the caller.

    Raises:
        UnauthorizedError: the token is invalid, expired, or auth is not configured.
    """
    if not settings.auth_enabled:
        logger.error("AUTH_JWT_SECRET is not configured; rejecting request")
        raise UnauthorizedError("Authentication is not configured")

    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
        )
    except ExpiredSignatureError:
        raise UnauthorizedError("Session expired")
    except JWTError as exc:
        logger.warning("Rejected access token: %s", exc)
        raise UnauthorizedError("Invalid authentication credentials")

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedError("Invalid authentication credentials")
    return CurrentUser(id=str(user_id), email=payload.get("email"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> CurrentUser:
    """FastAPI dependency: the verified caller, or 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError()
    return decode_access_token(credentials.credentials)
