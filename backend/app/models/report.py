# app/models/report.py
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Report(BaseModel):
    lessonId: str
    reason: str
    lessonTitle: Optional[str] = None
    reporterEmail: str
    reportedAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
