# app/middleware/rbac.py
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.models.user import Role
from app.utils.auth_utils import decode_token
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import USERS, get_database

bearer_scheme = HTTPBearer(auto_error=False)


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    # No header, or not "Bearer <token>": 401. Bad or expired token: 403.
    if credentials is None or not credentials.credentials:
        raise ErrorResponses.MISSING_TOKEN

    payload = decode_token(credentials.credentials)
    if not payload.get("email"):
        raise ErrorResponses.INVALID_TOKEN
    return payload


async def get_current_email(payload: dict = Depends(verify_token)) -> str:
    return payload["email"]


async def get_current_user(email: str = Depends(get_current_email), db=Depends(get_database)) -> dict:
    user = await db[USERS].find_one({"email": email})
    if not user:
        raise ErrorResponses.USER_NOT_FOUND
    return user


async def verify_admin(email: str = Depends(get_current_email), db=Depends(get_database)) -> dict:
    user = await db[USERS].find_one({"email": email})
    if not user or user.get("role") != Role.ADMIN.value:
        raise ErrorResponses.ADMIN_ONLY
    return user


async def verify_same_user(email: str, current_email: str = Depends(get_current_email)) -> str:
    """Guards ``/.../{email}`` routes: callers only read their own data."""
    if email != current_email:
        raise ErrorResponses.FORBIDDEN
    return email
