# backend/gmassist/schemas/__init__.py
from gmassist.schemas.user import UserCreate, UserResponse
from gmassist.schemas.auth import LoginRequest, TokenResponse
from gmassist.schemas.scenario import (
    ScenarioCreate, ScenarioUpdate, ScenarioResponse, ScenarioSessionResponse,
)
from gmassist.schemas.region import RegionCreate, RegionUpdate, RegionResponse
from gmassist.schemas.npc import NPCCreate, NPCUpdate, NPCResponse
from gmassist.schemas.quest import QuestCreate, QuestUpdate, QuestResponse
from gmassist.schemas.condition import ConditionCreate, ConditionUpdate, ConditionResponse
from gmassist.schemas.character import CharacterCreate, CharacterUpdate, CharacterResponse
from gmassist.schemas.session import (
    SessionCreate, SessionUpdate, SessionResponse,
    SessionPlayerCreate, SessionPlayerUpdate, SessionPlayerResponse,
)
from gmassist.schemas.node import (
    NodeCreate, NodeUpdate, NodeResponse,
    ConnectionCreate, ConnectionUpdate, ConnectionResponse,
)
from gmassist.schemas.timeline import (
    TimelineEventCreate, TimelineEventUpdate, TimelineEventResponse, TimelineReorder,
)

__all__ = [
    "UserCreate", "UserResponse", "LoginRequest", "TokenResponse",
    "ScenarioCreate", "ScenarioUpdate", "ScenarioResponse", "ScenarioSessionResponse",
    "RegionCreate", "RegionUpdate", "RegionResponse",
    "NPCCreate", "NPCUpdate", "NPCResponse",
    "QuestCreate", "QuestUpdate", "QuestResponse",
    "ConditionCreate", "ConditionUpdate", "ConditionResponse",
    "CharacterCreate", "CharacterUpdate", "CharacterResponse",
    "SessionCreate", "SessionUpdate", "SessionResponse",
    "SessionPlayerCreate", "SessionPlayerUpdate", "SessionPlayerResponse",
    "NodeCreate", "NodeUpdate", "NodeResponse",
    "ConnectionCreate", "ConnectionUpdate", "ConnectionResponse",
    "TimelineEventCreate", "TimelineEventUpdate", "TimelineEventResponse", "TimelineReorder",
]
