"""Favourite Index — per-type user/asset favourite marks with asymmetric idempotence.

Invariants:
    - At most one mark per (user_id, asset_id) within one asset type's table
    - toggle(True) on an existing mark raises AlreadyFavouritedError and changes nothing
    - toggle(True) on a fresh pair returns the new mark id (> 0)
    - toggle(False) always returns 0, whether or not a mark existed
    - remove_from_everyone deletes every mark on the asset, across all users

Design Decisions:
    - Check-then-insert kept for the common path; a concurrent duplicate that slips
      past the check hits uq_favourite_* and is reported as AlreadyFavouritedError,
      so the race can no longer produce two marks
    - Favouriting is not idempotent: the caller gets a fresh mark id or a conflict,
      never a silent success on a duplicate
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from assetvault.core.domain_types import AssetType
from assetvault.core.errors import AlreadyFavouritedError
from assetvault.infrastructure.database import store_operation
from assetvault.schemas.asset import FavouriteMark
from assetvault.services.variant_codec import Variant, variant_for_type

logger = logging.getLogger(__name__)


class SqlFavouriteIndex:
    """Favourite marks stored in one association table per asset type."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def toggle(
        self, user_id: int, asset_id: int, asset_type: AssetType,
        want_favourite: bool,
    ) -> int:
        """Set or clear a user's mark. Returns the new mark id, or 0 when clearing."""
        variant = variant_for_type(asset_type)
        if want_favourite:
            return await self._add(variant, user_id, asset_id)
        await self._remove(variant, user_id, asset_id)
        return 0

    async def _add(self, variant: Variant, user_id: int, asset_id: int) -> int:
        fav = variant.favourite_model
        async with store_operation(self.db, "favourite_asset"):
            result = await self.db.execute(
                select(func.count(fav.id)).where(
                    fav.user_id == user_id,
                    variant.favourite_asset_id == asset_id,
                ),
            )
            if result.scalar_one() > 0:
                raise AlreadyFavouritedError(
                    user_id, asset_id, variant.asset_type.value,
                )
            mark = variant.new_mark(user_id, asset_id)
            self.db.add(mark)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                logger.warning(
                    f"Concurrent favourite of {variant.asset_type.value} {asset_id} "
                    f"by user {user_id} rejected by unique constraint",
                    extra={
                        "asset_type": variant.asset_type.value,
                        "asset_id": asset_id,
                        "user_id": user_id,
                    },
                )
                raise AlreadyFavouritedError(
                    user_id, asset_id, variant.asset_type.value,
                ) from None
        logger.debug(
            f"User {user_id} favourited {variant.asset_type.value} {asset_id}",
            extra={
                "asset_type": variant.asset_type.value,
                "asset_id": asset_id,
                "user_id": user_id,
            },
        )
        return mark.id

    async def _remove(self, variant: Variant, user_id: int, asset_id: int) -> None:
        fav = variant.favourite_model
        async with store_operation(self.db, "unfavourite_asset"):
            await self.db.execute(
                delete(fav).where(
                    fav.user_id == user_id,
                    variant.favourite_asset_id == asset_id,
                ),
            )
            await self.db.commit()

    async def remove_from_everyone(
        self, asset_id: int, asset_type: AssetType,
    ) -> int:
        """Delete every user's mark on the asset. Returns how many were removed."""
        variant = variant_for_type(asset_type)
        async with store_operation(self.db, "remove_favourite_from_everyone"):
            result = await self.db.execute(
                delete(variant.favourite_model).where(
                    variant.favourite_asset_id == asset_id,
                ),
            )
            await self.db.commit()
        removed = result.rowcount or 0
        logger.debug(
            f"Removed {removed} favourite mark(s) from {variant.asset_type.value} {asset_id}",
            extra={"asset_type": variant.asset_type.value, "asset_id": asset_id},
        )
        return removed

    async def get_mark(
        self, user_id: int, asset_id: int, asset_type: AssetType,
    ) -> FavouriteMark | None:
        variant = variant_for_type(asset_type)
        fav = variant.favourite_model
        async with store_operation(self.db, "get_favourite"):
            result = await self.db.execute(
                select(fav).where(
                    fav.user_id == user_id,
                    variant.favourite_asset_id == asset_id,
                ),
            )
            mark = result.scalar_one_or_none()
        if mark is None:
            return None
        return FavouriteMark(
            id=mark.id,
            user_id=mark.user_id,
            asset_id=asset_id,
            asset_type=variant.asset_type,
        )
