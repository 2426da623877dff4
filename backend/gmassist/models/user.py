# backend/gmassist/models/user.py
from typing import List

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gmassist.models.base import Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    scenarios: Mapped[List["Scenario"]] = relationship(
        "Scenario", back_populates="user", cascade="all, delete-orphan"
    )
    sessions: Mapped[List["GameSession"]] = relationship(
        "GameSession", back_populates="user", cascade="all, delete-orphan"
    )
    characters: Mapped[List["PlayerCharacter"]] = relationship(
        "PlayerCharacter", back_populates="user", cascade="all, delete-orphan"
    )
