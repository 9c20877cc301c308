# app/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone

import jwt

from lifelessons.core.config import settings
from lifelessons.core.error_messages import ErrorResponses

logger = logging.getLogger(__name__)


def _encode(data: dict, expires_delta: timedelta, token_type: str) -> str:
    to_encode = data.copy()
    to_encode.update({
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": token_type,
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    expires_delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(data, expires_delta, "access")


def create_refresh_token(data: dict, expires_delta: timedelta = None) -> str:
    expires_delta = expires_delta or timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _encode(data, expires_delta, "refresh")


def create_token_pair(email: str, role: str) -> dict:
    claims = {"email": email, "role": role}
    return {
        "access_token": create_access_token(claims),
        "refresh_token": create_refresh_token(claims),
    }


def decode_token(token: str, expected_type: str = "access") -> dict:
    try:
        decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired %s token", expected_type)
        raise ErrorResponses.TOKEN_EXPIRED from None
    except jwt.InvalidTokenError as e:
        logger.info("Rejected invalid token: %s", e)
        raise ErrorResponses.INVALID_TOKEN from None

    if decoded.get("type") != expected_type:
        raise ErrorResponses.INVALID_TOKEN
    return decoded
