"""Boundary Protocols — contracts between the caller-facing store and its collaborators.

Invariants:
    - Core NEVER imports from services; dependency arrows point inward only
    - All store IO is reached through these Protocol types
    - Every method is async: the AsyncSession behind it is the cancellable context

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Asset ids are scoped per AssetType, so every lookup takes the type explicitly
"""

from typing import Protocol

from assetvault.core.domain_types import AssetType
from assetvault.schemas.asset import Asset, AssetPage, AssetPayload, AssetQuery, FavouriteMark


class AssetRepository(Protocol):
    """Contract for variant-dispatching asset persistence."""
    async def create(self, payload: AssetPayload) -> Asset: ...
    async def update(self, asset_id: int, payload: AssetPayload) -> Asset: ...
    async def get(self, asset_type: AssetType, asset_id: int) -> Asset: ...
    async def delete(self, asset_type: AssetType, asset_id: int) -> None: ...
    async def list(self, query: AssetQuery) -> AssetPage: ...
    async def count(self, asset_type: AssetType) -> int: ...
    async def max_id(self, asset_type: AssetType) -> int: ...


class FavouriteIndex(Protocol):
    """Contract for per-type user/asset favourite marks."""
    async def toggle(
        self, user_id: int, asset_id: int, asset_type: AssetType,
        want_favourite: bool,
    ) -> int: ...
    async def remove_from_everyone(
        self, asset_id: int, asset_type: AssetType,
    ) -> int: ...
    async def get_mark(
        self, user_id: int, asset_id: int, asset_type: AssetType,
    ) -> FavouriteMark | None: ...


class FavouriteLister(Protocol):
    """Contract for pages annotated with a per-user is_favourite flag."""
    async def list(
        self, user_id: int, only_favourites: bool, query: AssetQuery,
    ) -> AssetPage: ...
