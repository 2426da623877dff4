# backend/gmassist/schemas/ai.py
from typing import Optional, List, Dict, Any, Literal
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import CreatorMode, AIMode, NodeType, ConnectionType, NPCImportance
from gmassist.schemas.base import CamelModel


# Request contexts

class RecentEvent(CamelModel):
    name: str = Field(..., max_length=200)
    description: str = Field("", max_length=2000)
    phase: Optional[str] = None


class ConnectedNode(CamelModel):
    type: str
    name: str = Field(..., max_length=200)
    description: Optional[str] = Field(None, max_length=2000)


class EventGenerationContext(CamelModel):
    session_id: Optional[UUID] = None
    scenario_id: Optional[UUID] = None  # Loads the scenario and its regions into the prompt
    creator_mode: CreatorMode
    current_phase: str = "exploration"
    ai_mode: AIMode = AIMode.CONTINUITY
    event_type: Optional[str] = Field(None, max_length=50)
    recent_events: List[RecentEvent] = []
    connected_nodes: List[ConnectedNode] = []
    environment: Optional[str] = Field(None, max_length=50)
    threat_level: Optional[Literal["low", "medium", "high"]] = None
    time_of_day: Optional[str] = Field(None, max_length=50)
    weather: Optional[str] = Field(None, max_length=50)
    player_count: Optional[int] = Field(None, ge=1, le=20)


class NPCGenerationContext(CamelModel):
    setting: CreatorMode
    faction: Optional[str] = Field(None, max_length=200)
    role: Optional[str] = Field(None, max_length=200)
    threat_level: Optional[Literal["low", "medium", "high"]] = None
    relationship: Optional[Literal["ally", "neutral", "enemy", "unknown"]] = None
    importance: Optional[NPCImportance] = None


class SuggestionContext(CamelModel):
    query: str = Field(..., min_length=1, max_length=200)
    scenario_id: Optional[UUID] = None
    creator_mode: Optional[CreatorMode] = None
    limit: int = Field(5, ge=1, le=10)


# Parsed replies

class SuggestedNode(CamelModel):
    type: NodeType
    name: str = Field(..., min_length=1)
    description: str = ""
    properties: Dict[str, Any] = {}


class SuggestedConnection(CamelModel):
    from_type: str
    from_name: str
    to_type: str
    to_name: str
    connection_type: ConnectionType
    reasoning: Optional[str] = None


class GeneratedEvent(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    suggested_nodes: List[SuggestedNode] = []
    suggested_connections: List[SuggestedConnection] = []
    estimated_duration: int = Field(..., ge=0)
    pacing_impact: Literal["accelerate", "slow", "tension", "resolve"]
    gameplay_tips: List[str] = []
    alternative_outcomes: List[str] = []
    required_preparation: List[str] = []


class NPCProperties(CamelModel):
    faction: str
    motivation: str
    equipment: List[str] = []
    secrets: List[str] = []
    stats: Optional[Dict[str, float]] = None
    relationships: Optional[Dict[str, str]] = None
    backstory: Optional[str] = None


class GeneratedNPC(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: str = "npc"
    properties: NPCProperties


class SearchSuggestion(CamelModel):
    query: str = Field(..., min_length=1)
    type: Literal["semantic", "related", "trending"]
    relevance: float = Field(..., ge=0, le=1)
    context: Optional[str] = None


class SuggestionsResponse(CamelModel):
    suggestions: List[SearchSuggestion]
