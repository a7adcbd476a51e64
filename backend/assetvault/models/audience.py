"""Audience ORM — persists audience-segment assets.

Invariants:
    - id is an integer primary key assigned by the store, strictly increasing, never reused
    - gender is one of Gender values (male, female, other)
    - age_min <= age_max is the caller's concern, not checked here
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetvault.db.base import Base


class Audience(Base):
    """Audience row."""
    __tablename__ = "audiences"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    age_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    age_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, default="other")
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    hours_spent: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    number_of_purchases: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
