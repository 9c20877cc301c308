# lifelessons/db/database.py
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from lifelessons.core.config import settings

logger = logging.getLogger(__name__)

USERS = "users"
LESSONS = "lessons"
REPORTS = "reports"
FAVORITES = "favorites"
PAYMENTS = "payments"


def create_client(mongo_url: str = None) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(mongo_url or settings.MONGO_URL)


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency: the database handle built at startup."""
    return request.app.state.db


async def ensure_indexes(db: AsyncIOMotorDatabase):
    """
    Uniqueness lives in the store: one user per email, one favorite per
    (lessonId, userEmail) pair, one payment per transaction.
    """
    await db[USERS].create_index("email", unique=True)
    await db[FAVORITES].create_index([("lessonId", ASCENDING), ("userEmail", ASCENDING)], unique=True)
    await db[PAYMENTS].create_index("transactionId", unique=True)
    await db[LESSONS].create_index([("visibility", ASCENDING), ("createdAt", DESCENDING)])
    await db[LESSONS].create_index("authorEmail")
    logger.info("MongoDB indexes ensured")
