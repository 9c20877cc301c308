from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.models.lesson import AccessLevel, Visibility


class LessonCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: Optional[str] = None
    emotionalTone: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC
    accessLevel: AccessLevel = AccessLevel.FREE
    image: Optional[str] = None
    authorName: Optional[str] = None


class LessonUpdate(BaseModel):
    # likes, likesCount, authorEmail and createdAt are server-owned
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    emotionalTone: Optional[str] = None
    visibility: Optional[Visibility] = None
    accessLevel: Optional[AccessLevel] = None
    image: Optional[str] = None

    @field_validator("title", "description", "visibility", "accessLevel", mode="before")
    @classmethod
    def not_null(cls, value):
        # omitted means "leave as is"; an explicit null is not a valid value
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class LikeOut(BaseModel):
    liked: bool
    likesCount: int
