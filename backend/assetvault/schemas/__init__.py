"""Pydantic Schemas — domain contracts for assets, payload variants and pages.

Invariants:
    - Schemas validate at the system boundary (caller input, deserialized data)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are the caller contract, models are persistence
"""

from assetvault.schemas.asset import (  # noqa: F401
    Asset,
    AssetPage,
    AssetPayload,
    AssetQuery,
    AudiencePayload,
    ChartData,
    ChartPayload,
    FavouriteMark,
    InsightPayload,
)
