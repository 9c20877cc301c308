# lifelessons/service/lesson_service.py
"""
Public lesson listing: search, filters, sort and pagination over the
``lessons`` collection.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

from lifelessons.serialize import serialize_list

PUBLIC = "Public"
DEFAULT_PAGE_SIZE = 8
MAX_PAGE_SIZE = 100
# keeps skip far below the BSON int64 ceiling
MAX_PAGE = 1_000_000


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_SAVED = "most-saved"


SORT_KEYS = {
    SortMode.NEWEST: [("createdAt", DESCENDING), ("_id", DESCENDING)],
    SortMode.OLDEST: [("createdAt", ASCENDING), ("_id", ASCENDING)],
    SortMode.MOST_SAVED: [("likesCount", DESCENDING), ("_id", DESCENDING)],
}


@dataclass
class LessonQuery:
    filter: dict
    sort: List[Tuple[str, int]] = field(default_factory=list)
    skip: int = 0
    limit: int = DEFAULT_PAGE_SIZE


def parse_sort(value: Optional[str]) -> SortMode:
    try:
        return SortMode(value)
    except ValueError:
        return SortMode.NEWEST


def build_lesson_query(
    search: Optional[str] = None,
    category: Optional[str] = None,
    tone: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> LessonQuery:
    query = {"visibility": PUBLIC}

    if search:
        query["title"] = {"$regex": re.escape(search), "$options": "i"}
    if category:
        query["category"] = category
    if tone:
        query["emotionalTone"] = tone

    page = min(max(page, 1), MAX_PAGE)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)

    return LessonQuery(
        filter=query,
        sort=SORT_KEYS[parse_sort(sort)],
        skip=(page - 1) * limit,
        limit=limit,
    )


async def list_public_lessons(lessons, lesson_query: LessonQuery) -> dict:
    total_count = await lessons.count_documents(lesson_query.filter)
    cursor = lessons.find(
        lesson_query.filter,
        sort=lesson_query.sort,
        skip=lesson_query.skip,
        limit=lesson_query.limit,
    )
    data = await cursor.to_list(length=lesson_query.limit)
    return {"data": serialize_list(data), "totalCount": total_count}
