# app/routes/lessons.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.crud import lesson_crud
from app.middleware.rbac import get_current_email, verify_same_user
from app.models.lesson import Lesson
from app.models.user import Role
from app.schemas.lesson import LessonCreate, LessonUpdate, LikeOut
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import LESSONS, USERS, get_database
from lifelessons.serialize import (
    delete_result,
    insert_result,
    serialize_doc,
    serialize_list,
    to_object_id,
    update_result,
)
from lifelessons.service.engagement_service import toggle_like
from lifelessons.service.lesson_service import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    build_lesson_query,
    list_public_lessons,
)

logger = logging.getLogger(__name__)

lessons_router = APIRouter(tags=["Lessons"])


# -----------------------------
# Public listing
# -----------------------------
@lessons_router.get("/all-lessons")
async def all_lessons(
    search: Optional[str] = None,
    category: Optional[str] = None,
    tone: Optional[str] = None,
    sort: Optional[str] = Query(None, description="newest | oldest | most-saved"),
    page: int = Query(1, le=MAX_PAGE, description="1-indexed; values below 1 read as 1"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db=Depends(get_database),
):
    lesson_query = build_lesson_query(
        search=search, category=category, tone=tone, sort=sort, page=page, limit=limit
    )
    return await list_public_lessons(db[LESSONS], lesson_query)


# -----------------------------
# Author operations
# -----------------------------
@lessons_router.post("/add-lesson")
async def add_lesson(
    data: LessonCreate,
    email: str = Depends(get_current_email),
    db=Depends(get_database),
):
    lesson = Lesson(**data.model_dump(), authorEmail=email)
    result = await lesson_crud.create_lesson(db[LESSONS], lesson)
    logger.info("Lesson %s created by %s", result.inserted_id, email)
    return insert_result(result)


@lessons_router.get("/lessons/{lesson_id}")
async def get_lesson(lesson_id: str, email: str = Depends(get_current_email), db=Depends(get_database)):
    lesson = await lesson_crud.get_lesson(db[LESSONS], to_object_id(lesson_id))
    if not lesson:
        raise ErrorResponses.LESSON_NOT_FOUND
    return serialize_doc(lesson)


@lessons_router.get("/my-lessons/{email}")
async def my_lessons(email: str = Depends(verify_same_user), db=Depends(get_database)):
    lessons = await lesson_crud.get_lessons_by_author(db[LESSONS], email)
    return serialize_list(lessons)


@lessons_router.put("/update-lesson/{lesson_id}")
async def update_lesson(
    lesson_id: str,
    data: LessonUpdate,
    email: str = Depends(get_current_email),
    db=Depends(get_database),
):
    oid = to_object_id(lesson_id)
    update_data = data.model_dump(exclude_unset=True, mode="json")
    if not update_data:
        raise ErrorResponses.EMPTY_UPDATE

    lesson = await lesson_crud.get_lesson(db[LESSONS], oid)
    if not lesson:
        raise ErrorResponses.LESSON_NOT_FOUND
    if lesson.get("authorEmail") != email:
        raise ErrorResponses.NOT_OWNER

    result = await lesson_crud.update_lesson(db[LESSONS], oid, update_data)
    logger.info("Lesson %s updated by %s", lesson_id, email)
    return update_result(result)


@lessons_router.delete("/delete-lesson/{lesson_id}")
async def delete_lesson(lesson_id: str, email: str = Depends(get_current_email), db=Depends(get_database)):
    oid = to_object_id(lesson_id)
    lesson = await lesson_crud.get_lesson(db[LESSONS], oid)
    if not lesson:
        raise ErrorResponses.LESSON_NOT_FOUND

    if lesson.get("authorEmail") != email:
        caller = await db[USERS].find_one({"email": email})
        if not caller or caller.get("role") != Role.ADMIN.value:
            raise ErrorResponses.NOT_OWNER

    result = await lesson_crud.delete_lesson(db[LESSONS], oid)
    logger.info("Lesson %s deleted by %s", lesson_id, email)
    return delete_result(result)


# -----------------------------
# Likes
# -----------------------------
@lessons_router.patch("/lessons/like/{lesson_id}", response_model=LikeOut)
async def like_lesson(lesson_id: str, email: str = Depends(get_current_email), db=Depends(get_database)):
    return await toggle_like(db[LESSONS], to_object_id(lesson_id), email)
