# backend/gmassist/models/node.py
from typing import Optional, Any
from uuid import UUID
from sqlalchemy import String, Text, Integer, Float, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import NodeType, ConnectionType


class Node(Base, UUIDMixin, CreatedAtMixin):
    """A point on the session board: event, NPC, faction, location or item."""
    __tablename__ = "nodes"

    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), index=True)
    type: Mapped[NodeType] = mapped_column(enum_type(NodeType))
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    properties: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    x: Mapped[float] = mapped_column(Float, default=0.0)
    y: Mapped[float] = mapped_column(Float, default=0.0)

    session = relationship("GameSession", back_populates="nodes")
    outgoing = relationship(
        "Connection", foreign_keys="Connection.from_node_id",
        back_populates="from_node", cascade="all, delete"
    )
    incoming = relationship(
        "Connection", foreign_keys="Connection.to_node_id",
        back_populates="to_node", cascade="all, delete"
    )


class Connection(Base, UUIDMixin, CreatedAtMixin):
    """Directed edge between two nodes of the same session."""
    __tablename__ = "connections"

    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), index=True)
    from_node_id: Mapped[UUID] = mapped_column(ForeignKey("nodes.id", ondelete="CASCADE"))
    to_node_id: Mapped[UUID] = mapped_column(ForeignKey("nodes.id", ondelete="CASCADE"))
    type: Mapped[ConnectionType] = mapped_column(enum_type(ConnectionType))
    strength: Mapped[int] = mapped_column(Integer, default=1)  # 1-5
    description: Mapped[Optional[str]] = mapped_column(Text)

    session = relationship("GameSession", back_populates="connections")
    from_node = relationship("Node", foreign_keys=[from_node_id], back_populates="outgoing")
    to_node = relationship("Node", foreign_keys=[to_node_id], back_populates="incoming")
