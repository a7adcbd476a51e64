"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AssetType is a closed set of exactly 3 variants: insight, chart, audience
    - Asset ids are per type, not global; every cross-cutting call carries an AssetType
    - Gender is a closed set; anything unrecognised is stored as OTHER by callers

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to DB string columns without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AssetId = NewType("AssetId", int)
UserId = NewType("UserId", int)
FavouriteId = NewType("FavouriteId", int)


# ─── Enums ───────────────────────────────────────────────────────

class AssetType(str, Enum):
    """The three asset variants. Each owns its own table and favourite table."""
    INSIGHT = "insight"
    CHART = "chart"
    AUDIENCE = "audience"


class Gender(str, Enum):
    """Audience gender segment."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
