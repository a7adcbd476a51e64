"""Chart ORM — persists chart assets with their X/Y series.

Invariants:
    - id is an integer primary key assigned by the store, strictly increasing, never reused
    - data_json holds {"x": [...], "y": [...]} exactly as given; lengths are not checked

Design Decisions:
    - JSON column for the series: stored and returned as-is, never queried into
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetvault.db.base import Base


class Chart(Base):
    """Chart row."""
    __tablename__ = "charts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    x_title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    y_title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    data_json: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
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
