# backend/gmassist/models/condition.py
from typing import Optional, List
from uuid import UUID
from sqlalchemy import String, Text, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import ConditionSeverity


class EnvironmentalCondition(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "environmental_conditions"

    scenario_id: Mapped[UUID] = mapped_column(ForeignKey("scenarios.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    severity: Mapped[ConditionSeverity] = mapped_column(
        enum_type(ConditionSeverity), default=ConditionSeverity.MODERATE
    )
    affected_regions: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)  # Region ids
    duration: Mapped[Optional[str]] = mapped_column(String(200))

    scenario = relationship("Scenario", back_populates="conditions")
