# app/models/user.py
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    email: EmailStr
    name: Optional[str] = None
    photoURL: Optional[str] = None
    password: str  # argon2 hash

    role: Role = Role.USER
    isPremium: bool = False
    premiumSince: Optional[datetime] = None
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
