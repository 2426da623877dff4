# backend/gmassist/schemas/user.py
from datetime import datetime
from uuid import UUID
from pydantic import Field

from gmassist.schemas.base import CamelModel


class UserBase(CamelModel):
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_]+$")


class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=128)


class UserResponse(UserBase):
    id: UUID
    is_active: bool
    created_at: datetime
