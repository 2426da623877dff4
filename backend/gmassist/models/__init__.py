# backend/gmassist/models/__init__.py
from gmassist.models.base import Base
from gmassist.models.user import User
from gmassist.models.scenario import Scenario, ScenarioSession
from gmassist.models.region import Region
from gmassist.models.npc import ScenarioNPC
from gmassist.models.quest import ScenarioQuest
from gmassist.models.condition import EnvironmentalCondition
from gmassist.models.character import PlayerCharacter
from gmassist.models.session import GameSession, SessionPlayer
from gmassist.models.node import Node, Connection
from gmassist.models.timeline import TimelineEvent

__all__ = [
    "Base",
    "User",
    "Scenario", "ScenarioSession",
    "Region",
    "ScenarioNPC",
    "ScenarioQuest",
    "EnvironmentalCondition",
    "PlayerCharacter",
    "GameSession", "SessionPlayer",
    "Node", "Connection",
    "TimelineEvent",
]
