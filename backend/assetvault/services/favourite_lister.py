"""Favourite-Aware Lister — keyset pages annotated with a per-user is_favourite flag.

Invariants:
    - only_favourites=True: inner join to the user's marks; is_favourite is always True
    - only_favourites=False: left outer join; every asset of the type is eligible and
      is_favourite tells whether this user marked it
    - In both modes the cursor filters the asset's own id, ordering is by asset id
      per is_desc, and Limit caps the page
    - is_favourite is a real bool on every returned asset (never None on this path)

Design Decisions:
    - The join condition is only (asset id match AND user_id match); the cursor sits in
      WHERE. Putting the cursor inside a LEFT JOIN condition would leave the page
      unfiltered and only gate the annotation, so annotated listing could not paginate
    - Layered on top of the cursor paginator, not inside SqlAssetRepository: plain
      listing never pays for the join
"""

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from assetvault.infrastructure.database import store_operation
from assetvault.schemas.asset import AssetPage, AssetQuery
from assetvault.services.cursor_paginator import apply_cursor, build_page
from assetvault.services.variant_codec import variant_for_type


class SqlFavouriteLister:
    """Joins an asset table with its favourite table for one user."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(
        self, user_id: int, only_favourites: bool, query: AssetQuery,
    ) -> AssetPage:
        variant = variant_for_type(query.type)
        model = variant.model
        fav = variant.favourite_model

        on_clause = and_(
            variant.favourite_asset_id == model.id,
            fav.user_id == user_id,
        )
        stmt = select(model, fav.id.is_not(None).label("is_favourite"))
        if only_favourites:
            stmt = stmt.join(fav, on_clause)
        else:
            stmt = stmt.outerjoin(fav, on_clause)
        stmt = apply_cursor(stmt, model.id, query)

        async with store_operation(self.db, "list_favourite_assets"):
            result = await self.db.execute(stmt)
            rows = result.all()

        assets = [
            variant.to_asset(row, is_favourite=bool(is_favourite))
            for row, is_favourite in rows
        ]
        return build_page(query, assets)
