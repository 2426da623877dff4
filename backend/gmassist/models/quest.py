# backend/gmassist/models/quest.py
from typing import Optional
from uuid import UUID
from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import QuestStatus, QuestPriority


class ScenarioQuest(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "scenario_quests"

    scenario_id: Mapped[UUID] = mapped_column(ForeignKey("scenarios.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[QuestStatus] = mapped_column(enum_type(QuestStatus), default=QuestStatus.NOT_STARTED)
    priority: Mapped[QuestPriority] = mapped_column(enum_type(QuestPriority), default=QuestPriority.MEDIUM)
    rewards: Mapped[Optional[str]] = mapped_column(Text)
    requirements: Mapped[Optional[str]] = mapped_column(Text)

    scenario = relationship("Scenario", back_populates="quests")
