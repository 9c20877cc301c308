# app/models/lesson.py
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Visibility(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class AccessLevel(str, Enum):
    FREE = "free"
    PREMIUM = "premium"


class Lesson(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str
    description: str = ""
    category: Optional[str] = None
    emotionalTone: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC
    accessLevel: AccessLevel = AccessLevel.FREE
    image: Optional[str] = None

    authorEmail: str
    authorName: Optional[str] = None

    # likesCount always equals len(likes)
    likes: List[str] = []
    likesCount: int = 0
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
