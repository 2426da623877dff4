# backend/gmassist/schemas/quest.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import QuestStatus, QuestPriority
from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class QuestBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    status: QuestStatus = QuestStatus.NOT_STARTED
    priority: QuestPriority = QuestPriority.MEDIUM
    rewards: Optional[str] = Field(None, max_length=LONG_TEXT)
    requirements: Optional[str] = Field(None, max_length=LONG_TEXT)


class QuestCreate(QuestBase):
    scenario_id: UUID


class QuestUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    status: Optional[QuestStatus] = None
    priority: Optional[QuestPriority] = None
    rewards: Optional[str] = Field(None, max_length=LONG_TEXT)
    requirements: Optional[str] = Field(None, max_length=LONG_TEXT)

    required_fields = reject_null("title", "status", "priority")


class QuestResponse(QuestBase):
    id: UUID
    scenario_id: UUID
    created_at: datetime
