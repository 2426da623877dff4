# backend/gmassist/services/entity_schema.py
"""Field descriptors for a generic entity editor, derived from the create schemas."""
import typing
from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union
from uuid import UUID

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from gmassist.schemas.character import CharacterCreate
from gmassist.schemas.condition import ConditionCreate
from gmassist.schemas.node import NodeCreate, ConnectionCreate
from gmassist.schemas.npc import NPCCreate
from gmassist.schemas.quest import QuestCreate
from gmassist.schemas.region import RegionCreate
from gmassist.schemas.scenario import ScenarioCreate
from gmassist.schemas.session import SessionCreate, SessionPlayerCreate
from gmassist.schemas.timeline import TimelineEventCreate

ENTITY_KINDS: Dict[str, Type[BaseModel]] = {
    "scenario": ScenarioCreate,
    "region": RegionCreate,
    "npc": NPCCreate,
    "quest": QuestCreate,
    "condition": ConditionCreate,
    "character": CharacterCreate,
    "session": SessionCreate,
    "session-player": SessionPlayerCreate,
    "node": NodeCreate,
    "connection": ConnectionCreate,
    "timeline-event": TimelineEventCreate,
}

# Strings longer than this render as multi-line text
SHORT_TEXT_LIMIT = 200


def _unwrap_optional(annotation: Any) -> tuple:
    if typing.get_origin(annotation) is Union:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        nullable = len(args) < len(typing.get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return Union[tuple(args)], nullable
    return annotation, annotation is Any


def _constraints(field: FieldInfo) -> Dict[str, Any]:
    found: Dict[str, Any] = {}
    for item in field.metadata:
        for source, target in (
            ("min_length", "min_length"),
            ("max_length", "max_length"),
            ("ge", "minimum"),
            ("le", "maximum"),
        ):
            value = getattr(item, source, None)
            if value is not None:
                found[target] = value
    return found


def _field_type(annotation: Any, max_length: Optional[int]) -> tuple:
    origin = typing.get_origin(annotation)
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return "enum", [member.value for member in annotation]
    if origin in (list, List):
        return "list", None
    if origin in (dict, Dict) or annotation is Any:
        return "json", None
    if annotation is bool:
        return "boolean", None
    if annotation is int:
        return "integer", None
    if annotation is float:
        return "number", None
    if annotation is UUID:
        return "uuid", None
    if annotation is str:
        if max_length is not None and max_length > SHORT_TEXT_LIMIT:
            return "text", None
        return "string", None
    return "json", None


def _default(field: FieldInfo) -> Any:
    if field.is_required():
        return None
    value = field.get_default()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (str, int, float, bool)):
        return value
    return None


def describe(schema: Type[BaseModel]) -> List[Dict[str, Any]]:
    descriptors = []
    for name, field in schema.model_fields.items():
        annotation, nullable = _unwrap_optional(field.annotation)
        constraints = _constraints(field)
        field_type, options = _field_type(annotation, constraints.get("max_length"))
        descriptors.append({
            "name": field.alias or name,
            "type": field_type,
            "required": field.is_required(),
            "nullable": nullable,
            "options": options,
            "default": _default(field),
            **constraints,
        })
    return descriptors


def describe_kind(kind: str) -> List[Dict[str, Any]]:
    """Raises KeyError for an unknown kind."""
    return describe(ENTITY_KINDS[kind])
