# backend/gmassist/api/ai.py
import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gmassist.api.deps import DBSession, CurrentUser, get_owned_scenario
from gmassist.models.user import User
from gmassist.schemas.ai import (
    EventGenerationContext, NPCGenerationContext, SuggestionContext,
    GeneratedEvent, GeneratedNPC, SuggestionsResponse,
)
from gmassist.services.ai_service import AIService, get_ai_service, describe_scenario
from gmassist.services.seeding import list_regions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"])

AIClient = Annotated[AIService, Depends(get_ai_service)]


def _scenario_block(db: Session, scenario_id: Optional[UUID], user: User) -> Optional[str]:
    if scenario_id is None:
        return None
    scenario = get_owned_scenario(db, scenario_id, user)
    return describe_scenario(scenario, list_regions(db, scenario.id))


@router.post("/generate-event", response_model=GeneratedEvent)
def generate_event(
    context: EventGenerationContext,
    db: DBSession,
    current_user: CurrentUser,
    ai: AIClient,
):
    """Suggest an event for the session. Nothing is stored."""
    scenario_block = _scenario_block(db, context.scenario_id, current_user)
    return ai.generate_event(context, scenario_block)


@router.post("/generate-npc", response_model=GeneratedNPC)
def generate_npc(context: NPCGenerationContext, current_user: CurrentUser, ai: AIClient):
    return ai.generate_npc(context)


@router.post("/suggestions", response_model=SuggestionsResponse)
def search_suggestions(
    context: SuggestionContext,
    db: DBSession,
    current_user: CurrentUser,
    ai: AIClient,
):
    scenario_block = _scenario_block(db, context.scenario_id, current_user)
    return ai.suggest(context, scenario_block)
