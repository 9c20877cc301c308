# lifelessons/service/engagement_service.py
import logging
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from lifelessons.core.error_messages import ErrorResponses
from lifelessons.serialize import insert_result

logger = logging.getLogger(__name__)

PROJECTION = {"likesCount": 1}


async def toggle_like(lessons, lesson_id: ObjectId, email: str) -> dict:
    """
    Flip ``email``'s membership in the lesson's likes.

    Each write is filtered on the current membership, so the pull/push and
    the counter change land in the same document update or not at all.
    """
    unliked = await lessons.find_one_and_update(
        {"_id": lesson_id, "likes": email},
        {"$pull": {"likes": email}, "$inc": {"likesCount": -1}},
        projection=PROJECTION,
        return_document=ReturnDocument.AFTER,
    )
    if unliked is not None:
        logger.info("Lesson %s unliked by %s", lesson_id, email)
        return {"liked": False, "likesCount": unliked["likesCount"]}

    liked = await lessons.find_one_and_update(
        {"_id": lesson_id, "likes": {"$ne": email}},
        {"$addToSet": {"likes": email}, "$inc": {"likesCount": 1}},
        projection=PROJECTION,
        return_document=ReturnDocument.AFTER,
    )
    if liked is None:
        raise ErrorResponses.LESSON_NOT_FOUND

    logger.info("Lesson %s liked by %s", lesson_id, email)
    return {"liked": True, "likesCount": liked["likesCount"]}


async def add_favorite(favorites, favorite: dict, email: str) -> dict:
    """Insert a favorite; the unique (lessonId, userEmail) index rejects repeats."""
    doc = {**favorite, "userEmail": email, "addedAt": datetime.now(timezone.utc)}
    try:
        result = await favorites.insert_one(doc)
    except DuplicateKeyError:
        return {"message": "Already in favorites", "insertedId": None}
    return insert_result(result)
