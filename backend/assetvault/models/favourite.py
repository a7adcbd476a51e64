"""Favourite ORM — one association table per asset type linking users to assets.

Invariants:
    - At most one row per (user_id, <asset>_id) in each table (unique constraint)
    - No foreign key to the asset table: deleting an asset leaves its marks until
      remove_from_everyone runs
    - id is strictly increasing per table and returned to the caller on favouriting

Design Decisions:
    - Three structurally identical tables rather than one generic table: asset ids
      are per type, so each table pairs with exactly one asset table in joins
    - Unique constraint backs the check-then-insert in FavouriteIndex.toggle so a
      concurrent duplicate insert fails in the store instead of slipping through
    - user_id is a plain integer: user accounts live outside this library
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from assetvault.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class FavouriteInsight(Base):
    """A user's favourite mark on an insight."""
    __tablename__ = "favourite_insights"
    __table_args__ = (
        UniqueConstraint("user_id", "insight_id", name="uq_favourite_insight"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    insight_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )


class FavouriteChart(Base):
    """A user's favourite mark on a chart."""
    __tablename__ = "favourite_charts"
    __table_args__ = (
        UniqueConstraint("user_id", "chart_id", name="uq_favourite_chart"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    chart_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )


class FavouriteAudience(Base):
    """A user's favourite mark on an audience."""
    __tablename__ = "favourite_audiences"
    __table_args__ = (
        UniqueConstraint("user_id", "audience_id", name="uq_favourite_audience"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    audience_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
