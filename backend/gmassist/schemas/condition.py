# backend/gmassist/schemas/condition.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import ConditionSeverity
from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class ConditionBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    severity: ConditionSeverity = ConditionSeverity.MODERATE
    affected_regions: Optional[List[str]] = None  # Region ids of the same scenario
    duration: Optional[str] = Field(None, max_length=200)


class ConditionCreate(ConditionBase):
    scenario_id: UUID


class ConditionUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    severity: Optional[ConditionSeverity] = None
    affected_regions: Optional[List[str]] = None
    duration: Optional[str] = Field(None, max_length=200)

    required_fields = reject_null("name", "severity")


class ConditionResponse(ConditionBase):
    id: UUID
    scenario_id: UUID
    created_at: datetime
