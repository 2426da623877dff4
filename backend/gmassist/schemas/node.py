# backend/gmassist/schemas/node.py
from datetime import datetime
from typing import Optional, Dict, Any
from uuid import UUID
from pydantic import Field

from gmassist.models.enums import NodeType, ConnectionType
from gmassist.schemas.base import CamelModel, reject_null


class NodeBase(CamelModel):
    type: NodeType
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    properties: Optional[Dict[str, Any]] = None
    x: float = 0.0
    y: float = 0.0


class NodeCreate(NodeBase):
    session_id: UUID


class NodeUpdate(CamelModel):
    type: Optional[NodeType] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    properties: Optional[Dict[str, Any]] = None
    x: Optional[float] = None
    y: Optional[float] = None

    required_fields = reject_null("type", "name", "x", "y")


class NodeResponse(NodeBase):
    id: UUID
    session_id: UUID
    created_at: datetime


class ConnectionBase(CamelModel):
    from_node_id: UUID
    to_node_id: UUID
    type: ConnectionType
    strength: int = Field(1, ge=1, le=5)
    description: Optional[str] = Field(None, max_length=2000)


class ConnectionCreate(ConnectionBase):
    session_id: UUID


class ConnectionUpdate(CamelModel):
    type: Optional[ConnectionType] = None
    strength: Optional[int] = Field(None, ge=1, le=5)
    description: Optional[str] = Field(None, max_length=2000)

    required_fields = reject_null("type", "strength")


class ConnectionResponse(ConnectionBase):
    id: UUID
    session_id: UUID
    created_at: datetime
