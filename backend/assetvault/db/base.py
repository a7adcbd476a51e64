"""SQLAlchemy Declarative Base — shared base class for all asset and favourite tables.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for the schema (create_all and alembic)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all assetvault ORM models."""
    pass
