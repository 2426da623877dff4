# backend/gmassist/schemas/character.py
from datetime import datetime
from typing import Optional, Any
from uuid import UUID
from pydantic import Field

from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class CharacterBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    character_class: str = Field(..., min_length=1, max_length=100)
    level: int = Field(1, ge=1, le=100)
    background: Optional[str] = Field(None, max_length=LONG_TEXT)
    stats: Optional[Any] = None
    skills: Optional[Any] = None
    equipment: Optional[Any] = None
    notes: Optional[str] = Field(None, max_length=LONG_TEXT)
    is_active: bool = True
    session_id: Optional[UUID] = None


class CharacterCreate(CharacterBase):
    pass


class CharacterUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    character_class: Optional[str] = Field(None, min_length=1, max_length=100)
    level: Optional[int] = Field(None, ge=1, le=100)
    background: Optional[str] = Field(None, max_length=LONG_TEXT)
    stats: Optional[Any] = None
    skills: Optional[Any] = None
    equipment: Optional[Any] = None
    notes: Optional[str] = Field(None, max_length=LONG_TEXT)
    is_active: Optional[bool] = None
    session_id: Optional[UUID] = None

    required_fields = reject_null("name", "character_class", "level", "is_active")


class CharacterResponse(CharacterBase):
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
