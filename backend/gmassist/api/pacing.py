# backend/gmassist/api/pacing.py
from fastapi import APIRouter

from gmassist.models.enums import CreatorMode
from gmassist.schemas.pacing import PacingSchedule
from gmassist.services.pacing import describe_schedule

router = APIRouter(prefix="/pacing", tags=["Pacing"])


@router.get("/schedule/{mode}", response_model=PacingSchedule)
def get_schedule(mode: CreatorMode):
    """Phase durations for a creator mode"""
    return describe_schedule(mode)
