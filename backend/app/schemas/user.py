from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class RegisterSchema(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    photoURL: Optional[str] = None
    # only needed when the account is new; repeat sign-ins may omit it
    password: Optional[str] = Field(None, min_length=6)


class LoginSchema(BaseModel):
    email: EmailStr
    password: str


class RefreshSchema(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    role: Optional[str] = None
    isPremium: Optional[bool] = None


class RoleOut(BaseModel):
    role: Optional[str] = None
    isPremium: Optional[bool] = None


class AdminCheckOut(BaseModel):
    admin: bool
