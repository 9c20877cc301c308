"""
Pytest configuration: an in-memory MongoDB (mongomock-motor) injected into
the app, plus seeding and token helpers.
"""
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.main import create_app
from app.utils.auth_utils import create_access_token


@pytest.fixture
def db():
    return AsyncMongoMockClient()["lifelessons-test"]


@pytest.fixture
def run():
    """Drive a store coroutine from a synchronous test."""
    return asyncio.run


@pytest.fixture
def client(db):
    with TestClient(create_app(db=db)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    def _headers(email, role="user"):
        token = create_access_token({"email": email, "role": role})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def add_user(db, run):
    def _add(email, role="user", is_premium=False):
        result = run(db["users"].insert_one({
            "email": email,
            "name": email.split("@")[0],
            "role": role,
            "isPremium": is_premium,
            "createdAt": datetime.now(timezone.utc),
        }))
        return result.inserted_id

    return _add


@pytest.fixture
def add_lesson(db, run):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _add(title="Lesson", offset=0, **fields):
        doc = {
            "title": title,
            "description": "",
            "category": "Personal Growth",
            "emotionalTone": "Motivational",
            "visibility": "Public",
            "authorEmail": "author@x.com",
            "likes": [],
            "likesCount": 0,
            "createdAt": base + timedelta(days=offset),
        }
        doc.update(fields)
        return run(db["lessons"].insert_one(doc)).inserted_id

    return _add
