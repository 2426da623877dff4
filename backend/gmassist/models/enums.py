# backend/gmassist/models/enums.py
"""Closed sets of variants for every enumerated field.

Models store the ``value`` of each member; request schemas validate against
the same classes, so a variant is declared exactly once.
"""
from enum import Enum


class ScenarioStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class RegionType(str, Enum):
    CITY = "city"
    SETTLEMENT = "settlement"
    WASTELAND = "wasteland"
    FORTRESS = "fortress"
    TRADE_HUB = "trade_hub"
    INDUSTRIAL = "industrial"


class PoliticalStance(str, Enum):
    HOSTILE = "hostile"
    NEUTRAL = "neutral"
    FRIENDLY = "friendly"
    ALLIED = "allied"


class NPCImportance(str, Enum):
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"


class NPCStatus(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"
    MISSING = "missing"
    UNKNOWN = "unknown"


class QuestStatus(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class QuestPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ConditionSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"


class PlayerRole(str, Enum):
    PLAYER = "player"
    CO_GM = "co_gm"
    OBSERVER = "observer"


class CreatorMode(str, Enum):
    ROAD = "road"
    CITY = "city"


class AIMode(str, Enum):
    CHAOS = "chaos"
    CONTINUITY = "continuity"


class NodeType(str, Enum):
    EVENT = "event"
    NPC = "npc"
    FACTION = "faction"
    LOCATION = "location"
    ITEM = "item"


class ConnectionType(str, Enum):
    TEMPORAL = "temporal"
    SPATIAL = "spatial"
    FACTIONAL = "factional"
    OWNERSHIP = "ownership"


class SessionPhase(str, Enum):
    HOOK = "hook"
    EXPLORATION = "exploration"
    RISING_TENSION = "rising_tension"
    CLIMAX = "climax"
    RESOLUTION = "resolution"


class CompletionStatus(str, Enum):
    TRUE = "true"
    FALSE = "false"
    SKIPPED = "skipped"
