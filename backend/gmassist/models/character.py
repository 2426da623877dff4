# backend/gmassist/models/character.py
from typing import Optional, List, Any
from uuid import UUID
from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, TimestampMixin, UUIDMixin


class PlayerCharacter(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "player_characters"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    session_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("sessions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(200))
    character_class: Mapped[str] = mapped_column(String(100))
    level: Mapped[int] = mapped_column(Integer, default=1)
    background: Mapped[Optional[str]] = mapped_column(Text)
    # Free-form sheets, shape owned by the client
    stats: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    skills: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    equipment: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    user = relationship("User", back_populates="characters")
    session = relationship("GameSession", back_populates="characters")
    session_players: Mapped[List["SessionPlayer"]] = relationship(
        "SessionPlayer", back_populates="character", cascade="all, delete"
    )
