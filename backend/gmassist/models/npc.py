# backend/gmassist/models/npc.py
from typing import Optional
from uuid import UUID
from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import NPCImportance, NPCStatus


class ScenarioNPC(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "scenario_npcs"

    scenario_id: Mapped[UUID] = mapped_column(ForeignKey("scenarios.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    role: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    location: Mapped[Optional[str]] = mapped_column(String(200))
    faction: Mapped[Optional[str]] = mapped_column(String(200))
    importance: Mapped[NPCImportance] = mapped_column(enum_type(NPCImportance), default=NPCImportance.MINOR)
    status: Mapped[NPCStatus] = mapped_column(enum_type(NPCStatus), default=NPCStatus.ALIVE)

    scenario = relationship("Scenario", back_populates="npcs")
