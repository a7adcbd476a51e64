"""Asset Store — the caller-facing surface: assets, favourites and favourite-aware pages.

Invariants:
    - One AsyncSession per AssetStore; it is the cancellable context of every call
    - Page limits are validated against Settings.max_page_limit before any SQL runs
    - delete_asset does not remove favourite marks; callers that want a clean index
      follow it with remove_favourite_from_everyone
    - No operation retries, caches, or suppresses errors

Design Decisions:
    - Collaborators injected as Protocol types with SQL defaults: tests and other
      stores swap them without subclassing
    - Explicit method per operation over a generic dispatcher: every entry point is
      visible and documented in one place
"""

import logging
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from assetvault.config import get_settings
from assetvault.core.domain_types import AssetType
from assetvault.core.errors import AssetValidationError
from assetvault.core.pagination import descending_start, next_cursor
from assetvault.core.repository_protocols import (
    AssetRepository, FavouriteIndex, FavouriteLister,
)
from assetvault.schemas.asset import Asset, AssetPage, AssetPayload, AssetQuery
from assetvault.services.asset_repository import SqlAssetRepository
from assetvault.services.favourite_index import SqlFavouriteIndex
from assetvault.services.favourite_lister import SqlFavouriteLister

logger = logging.getLogger(__name__)


class AssetStore:
    """Assets, favourite marks and favourite-aware listing over one session."""

    def __init__(
        self,
        db: AsyncSession,
        *,
        assets: AssetRepository | None = None,
        favourites: FavouriteIndex | None = None,
        lister: FavouriteLister | None = None,
        max_page_limit: int | None = None,
    ):
        self.db = db
        self.assets = assets or SqlAssetRepository(db)
        self.favourites = favourites or SqlFavouriteIndex(db)
        self.lister = lister or SqlFavouriteLister(db)
        self.max_page_limit = max_page_limit or get_settings().max_page_limit

    def _check_limit(self, query: AssetQuery) -> None:
        if query.limit > self.max_page_limit:
            raise AssetValidationError(
                f"limit {query.limit} exceeds maximum of {self.max_page_limit}",
                "limit",
            )

    # ─── Assets ──────────────────────────────────────────────────

    async def create_asset(self, payload: AssetPayload) -> Asset:
        return await self.assets.create(payload)

    async def update_asset(self, asset_id: int, payload: AssetPayload) -> Asset:
        return await self.assets.update(asset_id, payload)

    async def get_asset(self, asset_type: AssetType, asset_id: int) -> Asset:
        return await self.assets.get(asset_type, asset_id)

    async def delete_asset(self, asset_type: AssetType, asset_id: int) -> None:
        await self.assets.delete(asset_type, asset_id)

    async def list_assets(self, query: AssetQuery) -> AssetPage:
        self._check_limit(query)
        return await self.assets.list(query)

    async def count_assets(self, asset_type: AssetType) -> int:
        return await self.assets.count(asset_type)

    async def descending_cursor(self, asset_type: AssetType) -> int:
        """Cursor for the newest page of a descending traversal (max id + 1)."""
        return descending_start(await self.assets.max_id(asset_type))

    async def iter_assets(
        self, asset_type: AssetType, page_size: int | None = None,
        is_desc: bool = False,
    ) -> AsyncIterator[Asset]:
        """Walk every asset of a type page by page, following each page's last_id."""
        limit = page_size or get_settings().default_page_limit
        cursor = await self.descending_cursor(asset_type) if is_desc else 0
        while cursor is not None:
            page = await self.list_assets(AssetQuery(
                limit=limit, last_id=cursor, type=asset_type, is_desc=is_desc,
            ))
            for asset in page.assets:
                yield asset
            if len(page.assets) < limit:
                break
            cursor = next_cursor(page.last_id, is_desc)

    # ─── Favourites ──────────────────────────────────────────────

    async def toggle_favourite(
        self, user_id: int, asset_id: int, asset_type: AssetType,
        is_favourite: bool,
    ) -> int:
        return await self.favourites.toggle(
            user_id, asset_id, asset_type, is_favourite,
        )

    async def list_favourite_assets(
        self, user_id: int, only_favourites: bool, query: AssetQuery,
    ) -> AssetPage:
        self._check_limit(query)
        return await self.lister.list(user_id, only_favourites, query)

    async def remove_favourite_from_everyone(
        self, asset_id: int, asset_type: AssetType,
    ) -> int:
        return await self.favourites.remove_from_everyone(asset_id, asset_type)
