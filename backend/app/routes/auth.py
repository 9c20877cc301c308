# app/routes/auth.py
import logging

from fastapi import APIRouter, Depends

from app.crud.user_crud import get_user_by_email
from app.middleware.rbac import get_current_user
from app.schemas.user import LoginSchema, RefreshSchema, TokenResponse
from app.utils.auth_utils import create_token_pair, decode_token
from app.utils.hash_utils import verify_password
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import USERS, get_database
from lifelessons.serialize import serialize_doc

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


# ------------------------
# Login
# ------------------------
@auth_router.post("/login", response_model=TokenResponse)
async def login(data: LoginSchema, db=Depends(get_database)):
    user = await get_user_by_email(db[USERS], data.email)
    if not user or not verify_password(data.password, user.get("password", "")):
        logger.warning("Failed login for %s", data.email)
        raise ErrorResponses.INVALID_CREDENTIALS

    return {
        **create_token_pair(user["email"], user.get("role", "user")),
        "role": user.get("role"),
        "isPremium": user.get("isPremium", False),
    }


# ------------------------
# Refresh token
# ------------------------
@auth_router.post("/refresh", response_model=TokenResponse)
async def refresh_token(data: RefreshSchema, db=Depends(get_database)):
    payload = decode_token(data.refresh_token, expected_type="refresh")
    email = payload.get("email")
    if not email:
        raise ErrorResponses.INVALID_TOKEN

    # role may have changed since the refresh token was issued
    user = await get_user_by_email(db[USERS], email)
    if not user:
        raise ErrorResponses.USER_NOT_FOUND

    return {
        **create_token_pair(email, user.get("role", "user")),
        "role": user.get("role"),
        "isPremium": user.get("isPremium", False),
    }


# ------------------------
# Get current user info
# ------------------------
@auth_router.get("/me")
async def get_current_user_info(current_user: dict = Depends(get_current_user)):
    return serialize_doc(current_user)
