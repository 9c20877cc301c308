# app/routes/admin.py
import logging

from fastapi import APIRouter, Depends

from app.crud.user_crud import list_users, promote_to_admin
from app.middleware.rbac import verify_admin
from app.schemas.dashboard import AdminStats
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import LESSONS, REPORTS, USERS, get_database
from lifelessons.serialize import serialize_list, to_object_id, update_result

logger = logging.getLogger(__name__)

admin_router = APIRouter(tags=["Admin"])


@admin_router.get("/users")
async def get_users(admin=Depends(verify_admin), db=Depends(get_database)):
    return serialize_list(await list_users(db[USERS]))


@admin_router.patch("/users/admin/{user_id}")
async def make_admin(user_id: str, admin=Depends(verify_admin), db=Depends(get_database)):
    result = await promote_to_admin(db[USERS], to_object_id(user_id))
    if result.matched_count == 0:
        raise ErrorResponses.USER_NOT_FOUND
    logger.info("User %s promoted to admin by %s", user_id, admin["email"])
    return update_result(result)


@admin_router.get("/admin-stats", response_model=AdminStats)
async def admin_stats(admin=Depends(verify_admin), db=Depends(get_database)):
    return {
        "users": await db[USERS].count_documents({}),
        "lessons": await db[LESSONS].count_documents({}),
        "reports": await db[REPORTS].count_documents({}),
    }
