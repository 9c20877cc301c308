from pydantic import BaseModel, Field
from typing import Optional


class ReportCreate(BaseModel):
    lessonId: str
    reason: str = Field(..., min_length=1)
    lessonTitle: Optional[str] = None


class FavoriteCreate(BaseModel):
    lessonId: str
    lessonTitle: Optional[str] = None
    category: Optional[str] = None
    emotionalTone: Optional[str] = None
    image: Optional[str] = None
