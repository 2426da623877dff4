# backend/gmassist/schemas/npc.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import NPCImportance, NPCStatus
from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class NPCBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    location: Optional[str] = Field(None, max_length=200)
    faction: Optional[str] = Field(None, max_length=200)
    importance: NPCImportance = NPCImportance.MINOR
    status: NPCStatus = NPCStatus.ALIVE


class NPCCreate(NPCBase):
    scenario_id: UUID


class NPCUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    location: Optional[str] = Field(None, max_length=200)
    faction: Optional[str] = Field(None, max_length=200)
    importance: Optional[NPCImportance] = None
    status: Optional[NPCStatus] = None

    required_fields = reject_null("name", "role", "importance", "status")


class NPCResponse(NPCBase):
    id: UUID
    scenario_id: UUID
    created_at: datetime
