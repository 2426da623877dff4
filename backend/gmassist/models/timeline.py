# backend/gmassist/models/timeline.py
from typing import Optional
from uuid import UUID
from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, CreatedAtMixin, UUIDMixin, enum_type
from gmassist.models.enums import SessionPhase, CreatorMode, CompletionStatus


class TimelineEvent(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "timeline_events"

    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    phase: Mapped[SessionPhase] = mapped_column(enum_type(SessionPhase))
    duration: Mapped[int] = mapped_column(Integer, default=0)  # Minutes
    order_index: Mapped[int] = mapped_column(Integer, default=0)
    creator_mode: Mapped[CreatorMode] = mapped_column(enum_type(CreatorMode))
    completion: Mapped[CompletionStatus] = mapped_column(
        enum_type(CompletionStatus), default=CompletionStatus.FALSE
    )

    session = relationship("GameSession", back_populates="timeline_events")
