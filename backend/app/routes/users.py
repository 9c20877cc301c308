# app/routes/users.py
import logging

from fastapi import APIRouter, Depends
from pymongo.errors import DuplicateKeyError

from app.crud.user_crud import create_user, get_user_by_email
from app.middleware.rbac import verify_same_user
from app.models.user import Role, User
from app.schemas.user import AdminCheckOut, RegisterSchema, RoleOut
from app.utils.hash_utils import hash_password
from lifelessons.core.config import settings
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import USERS, get_database
from lifelessons.serialize import insert_result

logger = logging.getLogger(__name__)

users_router = APIRouter(tags=["Users"])

USER_EXISTS = {"message": "User already exists", "insertedId": None}


@users_router.post("/users")
async def save_user(data: RegisterSchema, db=Depends(get_database)):
    # Repeat sign-ins are a no-op; the unique email index still settles races.
    if await get_user_by_email(db[USERS], data.email):
        return USER_EXISTS
    if not data.password:
        raise ErrorResponses.PASSWORD_REQUIRED

    # Bootstrap admin comes from config; everyone else starts as a plain user.
    role = Role.ADMIN if settings.ADMIN_EMAIL and data.email == settings.ADMIN_EMAIL else Role.USER

    user = User(
        **data.model_dump(exclude={"password"}),
        password=hash_password(data.password),
        role=role,
    )
    try:
        result = await create_user(db[USERS], user)
    except DuplicateKeyError:
        return USER_EXISTS

    logger.info("Registered user %s as %s", data.email, user.role)
    return insert_result(result)


@users_router.get("/users/role/{email}", response_model=RoleOut)
async def get_user_role(email: str = Depends(verify_same_user), db=Depends(get_database)):
    user = await get_user_by_email(db[USERS], email) or {}
    return {"role": user.get("role"), "isPremium": user.get("isPremium")}


@users_router.get("/users/admin/{email}", response_model=AdminCheckOut)
async def is_user_admin(email: str = Depends(verify_same_user), db=Depends(get_database)):
    user = await get_user_by_email(db[USERS], email)
    return {"admin": bool(user) and user.get("role") == Role.ADMIN.value}
