"""Insight ORM — persists free-text insight assets.

Invariants:
    - id is an integer primary key assigned by the store, strictly increasing, never reused
    - text and description are stored verbatim

Design Decisions:
    - sqlite_autoincrement: SQLite would otherwise recycle the id of a deleted max row
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetvault.db.base import Base


class Insight(Base):
    """Insight row."""
    __tablename__ = "insights"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
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
