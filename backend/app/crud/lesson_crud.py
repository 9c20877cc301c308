# app/crud/lesson_crud.py
from datetime import datetime, timezone

from bson import ObjectId

from app.models.lesson import Lesson


async def create_lesson(lessons, lesson: Lesson):
    return await lessons.insert_one(lesson.model_dump())


async def get_lesson(lessons, lesson_id: ObjectId):
    return await lessons.find_one({"_id": lesson_id})


async def get_lessons_by_author(lessons, email: str):
    cursor = lessons.find({"authorEmail": email}, sort=[("createdAt", -1)])
    return await cursor.to_list(length=None)


async def update_lesson(lessons, lesson_id: ObjectId, update_data: dict):
    update_data = {**update_data, "updatedAt": datetime.now(timezone.utc)}
    return await lessons.update_one({"_id": lesson_id}, {"$set": update_data})


async def delete_lesson(lessons, lesson_id: ObjectId):
    return await lessons.delete_one({"_id": lesson_id})
