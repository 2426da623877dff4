# backend/gmassist/schemas/pacing.py
from typing import List, Literal

from gmassist.models.enums import CreatorMode
from gmassist.schemas.base import CamelModel


class PacingPhase(CamelModel):
    index: int
    key: str
    name: str
    duration: int
    starts_at: int


class PacingSchedule(CamelModel):
    mode: CreatorMode
    total_minutes: int
    phases: List[PacingPhase]


class PacingAssessment(CamelModel):
    mode: CreatorMode
    phase_index: int
    phase_key: str
    phase_name: str
    elapsed_minutes: int
    expected_start: int
    delay: int
    status: Literal["behind", "ahead", "on_track"]
    message: str
