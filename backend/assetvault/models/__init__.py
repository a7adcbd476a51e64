"""ORM Models — SQLAlchemy declarative models for asset variants and favourite marks.

Invariants:
    - All models inherit from Base (db/base.py)
    - Each AssetType owns one asset table and one favourite table

Design Decisions:
    - One file per asset variant; the three favourite tables share a file because
      they are structurally identical
    - All models imported here so Base.metadata is complete before create_all or alembic runs
"""

from assetvault.models.insight import Insight  # noqa: F401
from assetvault.models.chart import Chart  # noqa: F401
from assetvault.models.audience import Audience  # noqa: F401
from assetvault.models.favourite import (  # noqa: F401
    FavouriteInsight, FavouriteChart, FavouriteAudience,
)
