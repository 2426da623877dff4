# backend/gmassist/models/session.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, TimestampMixin, UUIDMixin, enum_type, utcnow
from gmassist.models.enums import CreatorMode, AIMode, PlayerRole


class GameSession(Base, UUIDMixin, TimestampMixin):
    """A play session run by a game master."""
    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    creator_mode: Mapped[CreatorMode] = mapped_column(enum_type(CreatorMode))
    current_phase: Mapped[int] = mapped_column(Integer, default=0)
    duration: Mapped[int] = mapped_column(Integer, default=0)  # Elapsed minutes
    ai_mode: Mapped[AIMode] = mapped_column(enum_type(AIMode), default=AIMode.CONTINUITY)

    user = relationship("User", back_populates="sessions")

    # Characters are detached, not deleted, when the session goes away
    characters: Mapped[List["PlayerCharacter"]] = relationship(
        "PlayerCharacter", back_populates="session"
    )
    players: Mapped[List["SessionPlayer"]] = relationship(
        "SessionPlayer", back_populates="session", cascade="all, delete-orphan"
    )
    nodes: Mapped[List["Node"]] = relationship(
        "Node", back_populates="session", cascade="all, delete-orphan"
    )
    connections: Mapped[List["Connection"]] = relationship(
        "Connection", back_populates="session", cascade="all, delete-orphan"
    )
    timeline_events: Mapped[List["TimelineEvent"]] = relationship(
        "TimelineEvent", back_populates="session", cascade="all, delete-orphan",
        order_by="TimelineEvent.order_index"
    )
    scenario_links: Mapped[List["ScenarioSession"]] = relationship(
        "ScenarioSession", back_populates="session", cascade="all, delete-orphan"
    )


class SessionPlayer(Base, UUIDMixin):
    __tablename__ = "session_players"

    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    character_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("player_characters.id", ondelete="CASCADE"), nullable=True
    )
    role: Mapped[PlayerRole] = mapped_column(enum_type(PlayerRole), default=PlayerRole.PLAYER)
    is_online: Mapped[bool] = mapped_column(Boolean, default=False)
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    last_active: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    session = relationship("GameSession", back_populates="players")
    character = relationship("PlayerCharacter", back_populates="session_players")
