# backend/gmassist/schemas/timeline.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import SessionPhase, CreatorMode, CompletionStatus
from gmassist.schemas.base import CamelModel, reject_null


class TimelineEventBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    phase: SessionPhase
    duration: int = Field(0, ge=0, le=300)
    order_index: int = Field(0, ge=0)
    creator_mode: CreatorMode
    completion: CompletionStatus = CompletionStatus.FALSE


class TimelineEventCreate(TimelineEventBase):
    session_id: UUID


class TimelineEventUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    phase: Optional[SessionPhase] = None
    duration: Optional[int] = Field(None, ge=0, le=300)
    order_index: Optional[int] = Field(None, ge=0)
    creator_mode: Optional[CreatorMode] = None
    completion: Optional[CompletionStatus] = None

    required_fields = reject_null(
        "name", "phase", "duration", "order_index", "creator_mode", "completion"
    )


class TimelineEventResponse(TimelineEventBase):
    id: UUID
    session_id: UUID
    created_at: datetime


class TimelineReorder(CamelModel):
    ordered_ids: List[UUID] = Field(..., min_length=1)
