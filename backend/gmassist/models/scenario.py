# backend/gmassist/models/scenario.py
from typing import Optional, List
from uuid import UUID
from sqlalchemy import String, Text, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin, enum_type
from gmassist.models.enums import ScenarioStatus


class Scenario(Base, UUIDMixin, TimestampMixin):
    """Root of a scenario's content tree."""
    __tablename__ = "scenarios"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    main_idea: Mapped[str] = mapped_column(Text)
    world_context: Mapped[Optional[str]] = mapped_column(Text)
    political_situation: Mapped[Optional[str]] = mapped_column(Text)
    key_themes: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    status: Mapped[ScenarioStatus] = mapped_column(
        enum_type(ScenarioStatus), default=ScenarioStatus.DRAFT, index=True
    )

    user = relationship("User", back_populates="scenarios")

    regions: Mapped[List["Region"]] = relationship(
        "Region", back_populates="scenario", cascade="all, delete-orphan"
    )
    npcs: Mapped[List["ScenarioNPC"]] = relationship(
        "ScenarioNPC", back_populates="scenario", cascade="all, delete-orphan"
    )
    quests: Mapped[List["ScenarioQuest"]] = relationship(
        "ScenarioQuest", back_populates="scenario", cascade="all, delete-orphan"
    )
    conditions: Mapped[List["EnvironmentalCondition"]] = relationship(
        "EnvironmentalCondition", back_populates="scenario", cascade="all, delete-orphan"
    )
    session_links: Mapped[List["ScenarioSession"]] = relationship(
        "ScenarioSession", back_populates="scenario", cascade="all, delete-orphan"
    )


class ScenarioSession(Base, UUIDMixin, CreatedAtMixin):
    """Links a scenario to a game session it is played in."""
    __tablename__ = "scenario_sessions"

    scenario_id: Mapped[UUID] = mapped_column(ForeignKey("scenarios.id", ondelete="CASCADE"), index=True)
    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), index=True)

    scenario = relationship("Scenario", back_populates="session_links")
    session = relationship("GameSession", back_populates="scenario_links")

    __table_args__ = (
        UniqueConstraint("scenario_id", "session_id", name="uq_scenario_session"),
    )
