# app/routes/favorites.py
from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_email, verify_same_user
from app.schemas.engagement import FavoriteCreate
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import FAVORITES, get_database
from lifelessons.serialize import delete_result, serialize_list, to_object_id
from lifelessons.service.engagement_service import add_favorite

favorites_router = APIRouter(prefix="/favorites", tags=["Favorites"])


@favorites_router.post("")
async def create_favorite(data: FavoriteCreate, email: str = Depends(get_current_email), db=Depends(get_database)):
    return await add_favorite(db[FAVORITES], data.model_dump(), email)


@favorites_router.get("/{email}")
async def my_favorites(email: str = Depends(verify_same_user), db=Depends(get_database)):
    favorites = await db[FAVORITES].find({"userEmail": email}, sort=[("addedAt", -1)]).to_list(length=None)
    return serialize_list(favorites)


@favorites_router.delete("/{favorite_id}")
async def remove_favorite(favorite_id: str, email: str = Depends(get_current_email), db=Depends(get_database)):
    # scoped to the caller so nobody removes someone else's favorite
    result = await db[FAVORITES].delete_one({"_id": to_object_id(favorite_id), "userEmail": email})
    if result.deleted_count == 0:
        raise ErrorResponses.FAVORITE_NOT_FOUND
    return delete_result(result)
