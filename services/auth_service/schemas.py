from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ProfileCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: Optional[str] = None


class ProfileLogin(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str


class ProfileResponse(BaseModel):
    id: int
    email: str
    role: str
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
