# backend/gmassist/schemas/session.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import CreatorMode, AIMode, PlayerRole
from gmassist.schemas.base import CamelModel, reject_null


class SessionBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    creator_mode: CreatorMode
    current_phase: int = Field(0, ge=0)
    duration: int = Field(0, ge=0, le=600)  # Elapsed minutes
    ai_mode: AIMode = AIMode.CONTINUITY


class SessionCreate(SessionBase):
    pass


class SessionUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    creator_mode: Optional[CreatorMode] = None
    current_phase: Optional[int] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0, le=600)
    ai_mode: Optional[AIMode] = None

    required_fields = reject_null("name", "creator_mode", "current_phase", "duration", "ai_mode")


class SessionResponse(SessionBase):
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class SessionPlayerCreate(CamelModel):
    user_id: Optional[UUID] = None  # Defaults to the caller
    character_id: Optional[UUID] = None
    role: PlayerRole = PlayerRole.PLAYER
    is_online: bool = False


class SessionPlayerUpdate(CamelModel):
    character_id: Optional[UUID] = None
    role: Optional[PlayerRole] = None
    is_online: Optional[bool] = None

    required_fields = reject_null("role", "is_online")


class SessionPlayerResponse(CamelModel):
    id: UUID
    session_id: UUID
    user_id: UUID
    character_id: Optional[UUID] = None
    role: PlayerRole
    is_online: bool
    joined_at: datetime
    last_active: datetime
