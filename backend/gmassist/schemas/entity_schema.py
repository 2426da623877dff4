# backend/gmassist/schemas/entity_schema.py
from typing import Optional, List, Union

from gmassist.schemas.base import CamelModel


class FieldDescriptor(CamelModel):
    name: str
    type: str  # string, text, integer, number, boolean, enum, list, json, uuid
    required: bool
    nullable: bool
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    options: Optional[List[str]] = None
    default: Optional[Union[str, int, float, bool]] = None


class EntitySchema(CamelModel):
    kind: str
    fields: List[FieldDescriptor]
