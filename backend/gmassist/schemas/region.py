# backend/gmassist/schemas/region.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import RegionType, PoliticalStance
from gmassist.schemas.base import CamelModel, LONG_TEXT, reject_null


class RegionBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: RegionType
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    controlling_faction: Optional[str] = Field(None, max_length=200)
    population: Optional[int] = Field(None, ge=0)
    resources: Optional[List[str]] = None
    threat_level: int = Field(1, ge=1, le=5)
    political_stance: Optional[PoliticalStance] = None
    trade_routes: Optional[List[str]] = None  # Region ids


class RegionCreate(RegionBase):
    scenario_id: UUID


class RegionUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[RegionType] = None
    description: Optional[str] = Field(None, max_length=LONG_TEXT)
    controlling_faction: Optional[str] = Field(None, max_length=200)
    population: Optional[int] = Field(None, ge=0)
    resources: Optional[List[str]] = None
    threat_level: Optional[int] = Field(None, ge=1, le=5)
    political_stance: Optional[PoliticalStance] = None
    trade_routes: Optional[List[str]] = None

    required_fields = reject_null("name", "type", "threat_level")


class RegionResponse(RegionBase):
    id: UUID
    scenario_id: UUID
    created_at: datetime
