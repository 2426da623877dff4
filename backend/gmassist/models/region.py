# backend/gmassist/models/region.py
from typing import Optional, List
from uuid import UUID
from sqlalchemy import String, Text, Integer, ForeignKey, JSON, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import RegionType, PoliticalStance


class Region(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "regions"

    scenario_id: Mapped[UUID] = mapped_column(ForeignKey("scenarios.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    type: Mapped[RegionType] = mapped_column(enum_type(RegionType))
    description: Mapped[Optional[str]] = mapped_column(Text)
    controlling_faction: Mapped[Optional[str]] = mapped_column(String(200))
    population: Mapped[Optional[int]] = mapped_column(Integer)
    resources: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    threat_level: Mapped[int] = mapped_column(Integer, default=1)  # 1-5
    political_stance: Mapped[Optional[PoliticalStance]] = mapped_column(
        enum_type(PoliticalStance), nullable=True
    )
    trade_routes: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)  # Region ids

    scenario = relationship("Scenario", back_populates="regions")

    __table_args__ = (
        CheckConstraint("threat_level BETWEEN 1 AND 5", name="ck_regions_threat_level"),
    )
