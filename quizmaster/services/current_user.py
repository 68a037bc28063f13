from __future__ import annotations

from typing import Any
from uuid import UUID

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from quizmaster.core.config import get_settings

logger = structlog.get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    pass


def decode_user_id(
    token: str,
    *,
    secret_key: str,
    algorithm: str,
    audience: str | None = None,
    issuer: str | None = None,
) -> UUID:
    """Validate a bearer token and return the user id carried in its ``sub`` claim."""
    if not secret_key:
        raise InvalidTokenError("token verification key is not configured")
    try:
        claims: dict[str, Any] = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            audience=audience,
            issuer=issuer,
            options={"verify_aud": audience is not None},
        )
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError("token has no subject")
    try:
        return UUID(subject)
    except ValueError as exc:
        raise InvalidTokenError("token subject is not a user id") from exc


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UUID:
    if credentials is None or credentials.scheme.lower() != "bearer":
        logger.warning("auth_failed", reason="missing_bearer_token")
        raise _unauthorized()

    settings = get_settings()
    try:
        return decode_user_id(
            credentials.credentials,
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except InvalidTokenError as exc:
        logger.warning("auth_failed", reason="invalid_token", error=str(exc))
        raise _unauthorized() from exc
