"""Asset Repository — create/update/get/delete/list for any variant, dispatching on the type tag.

Invariants:
    - Every operation resolves its Variant first: unknown type -> UnknownAssetTypeError
      before any SQL runs
    - create assigns the id in the store and returns the round-tripped payload
    - update keeps the id, overwrites every payload field; missing row -> AssetNotFoundError
    - delete is a hard delete and does NOT touch favourite marks
    - Each write commits its own unit of work; failures roll back and raise PersistenceError

Design Decisions:
    - update on a missing id fails instead of saving a blank row: a silent insert under
      a new id would hand the caller an asset they never created
    - delete of an absent id is a no-op: the end state the caller asked for already holds
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from assetvault.core.domain_types import AssetType
from assetvault.core.errors import AssetNotFoundError, AssetValidationError
from assetvault.infrastructure.database import store_operation
from assetvault.schemas.asset import Asset, AssetPage, AssetPayload, AssetQuery
from assetvault.services.cursor_paginator import apply_cursor, build_page
from assetvault.services.variant_codec import variant_for_payload, variant_for_type

logger = logging.getLogger(__name__)


class SqlAssetRepository:
    """Variant-dispatching asset persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load(self, variant, asset_id: int):
        # SELECT rather than session.get: a row removed by a bulk DELETE must not
        # be served from the identity map
        result = await self.db.execute(
            select(variant.model).where(variant.model.id == asset_id),
        )
        return result.scalar_one_or_none()

    async def create(self, payload: AssetPayload) -> Asset:
        """Insert a new row for the payload's variant."""
        variant = variant_for_payload(payload)
        async with store_operation(self.db, "create_asset"):
            row = variant.new_row(payload)
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        logger.debug(
            f"Created {variant.asset_type.value} {row.id}",
            extra={"asset_type": variant.asset_type.value, "asset_id": row.id},
        )
        return variant.to_asset(row)

    async def update(self, asset_id: int, payload: AssetPayload) -> Asset:
        """Replace all payload fields of an existing row."""
        variant = variant_for_payload(payload)
        if asset_id <= 0:
            raise AssetValidationError(
                f"asset id must be positive, got {asset_id}", "asset_id",
            )
        async with store_operation(self.db, "update_asset"):
            row = await self._load(variant, asset_id)
            if row is None:
                raise AssetNotFoundError(variant.asset_type.value, asset_id)
            variant.apply(row, payload)
            await self.db.commit()
            await self.db.refresh(row)
        return variant.to_asset(row)

    async def get(self, asset_type: AssetType, asset_id: int) -> Asset:
        variant = variant_for_type(asset_type)
        async with store_operation(self.db, "get_asset"):
            row = await self._load(variant, asset_id)
        if row is None:
            raise AssetNotFoundError(variant.asset_type.value, asset_id)
        return variant.to_asset(row)

    async def delete(self, asset_type: AssetType, asset_id: int) -> None:
        """Hard-delete one row. Favourite marks are left for remove_from_everyone."""
        variant = variant_for_type(asset_type)
        async with store_operation(self.db, "delete_asset"):
            await self.db.execute(
                delete(variant.model).where(variant.model.id == asset_id),
            )
            await self.db.commit()
        logger.debug(
            f"Deleted {variant.asset_type.value} {asset_id}",
            extra={"asset_type": variant.asset_type.value, "asset_id": asset_id},
        )

    async def list(self, query: AssetQuery) -> AssetPage:
        """One keyset page of the query's type, without favourite annotation."""
        variant = variant_for_type(query.type)
        stmt = apply_cursor(select(variant.model), variant.model.id, query)
        async with store_operation(self.db, "list_assets"):
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        return build_page(query, [variant.to_asset(r) for r in rows])

    async def count(self, asset_type: AssetType) -> int:
        variant = variant_for_type(asset_type)
        async with store_operation(self.db, "count_assets"):
            result = await self.db.execute(
                select(func.count(variant.model.id)),
            )
        return result.scalar_one()

    async def max_id(self, asset_type: AssetType) -> int:
        """Highest id currently stored for the type, 0 when the table is empty."""
        variant = variant_for_type(asset_type)
        async with store_operation(self.db, "max_asset_id"):
            result = await self.db.execute(select(func.max(variant.model.id)))
        return result.scalar_one_or_none() or 0
