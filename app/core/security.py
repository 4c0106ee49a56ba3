# app/core/security.py
"""Bearer-token verification resolving the requester's user id."""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends, Header

from app.core.config import Settings, get_settings
from app.core.errors import NotAuthenticatedError

logger = logging.getLogger(__name__)


def create_access_token(user_id: str, settings: Settings) -> str:
    expires = datetime.now(timezone.utc) + timedelta(days=settings.JWT_EXPIRE_DAYS)
    payload = {"id": user_id, "exp": expires}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> str:
    """Return the user id carried by ``token`` or raise NotAuthenticatedError."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.debug("JWT expired")
        raise NotAuthenticatedError() from None
    except jwt.InvalidTokenError as e:
        logger.debug("JWT validation failed: %s", e)
        raise NotAuthenticatedError() from e

    user_id = payload.get("id")
    if not user_id:
        raise NotAuthenticatedError()
    return str(user_id)


def get_current_user_id(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise NotAuthenticatedError("Not authorized, no token")
    return decode_access_token(authorization.split(" ", 1)[1], settings)
