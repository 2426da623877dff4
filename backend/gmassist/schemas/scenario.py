# backend/gmassist/schemas/scenario.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import ScenarioStatus
from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class ScenarioBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    main_idea: str = Field(..., min_length=10, max_length=LONG_TEXT)
    world_context: Optional[str] = Field(None, max_length=LONG_TEXT)
    political_situation: Optional[str] = Field(None, max_length=LONG_TEXT)
    key_themes: Optional[List[str]] = None
    status: ScenarioStatus = ScenarioStatus.DRAFT


class ScenarioCreate(ScenarioBase):
    pass


class ScenarioUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    main_idea: Optional[str] = Field(None, min_length=10, max_length=LONG_TEXT)
    world_context: Optional[str] = Field(None, max_length=LONG_TEXT)
    political_situation: Optional[str] = Field(None, max_length=LONG_TEXT)
    key_themes: Optional[List[str]] = None
    status: Optional[ScenarioStatus] = None

    required_fields = reject_null("title", "main_idea", "status")


class ScenarioResponse(ScenarioBase):
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class ScenarioSessionResponse(CamelModel):
    id: UUID
    scenario_id: UUID
    session_id: UUID
    created_at: datetime
