# backend/gmassist/schemas/search.py
from typing import List

from gmassist.schemas.base import CamelModel
from gmassist.schemas.region import RegionResponse
from gmassist.schemas.npc import NPCResponse
from gmassist.schemas.quest import QuestResponse
from gmassist.schemas.condition import ConditionResponse


class ScenarioSearchResult(CamelModel):
    query: str
    regions: List[RegionResponse]
    npcs: List[NPCResponse]
    quests: List[QuestResponse]
    conditions: List[ConditionResponse]
