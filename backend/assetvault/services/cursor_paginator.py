"""Cursor Paginator — keyset paging over a single id-ordered table.

Invariants:
    - Ascending: id > last_id ORDER BY id ASC LIMIT n (last_id=0 -> first page)
    - Descending: id < last_id ORDER BY id DESC LIMIT n (no sentinel; start at max_id + 1)
    - Chained ascending pages (cursor = previous page.last_id) are disjoint and cover
      the table exactly once when nothing is deleted in between
    - Page first_id / last_id come from the rows returned, never from the request

Design Decisions:
    - apply_cursor works on any Select so the favourite-aware lister reuses it
      after adding its join
    - Explicit ORDER BY in both directions: row order is never left to the engine
"""

from typing import Sequence

from sqlalchemy import Select

from assetvault.core.pagination import page_bounds
from assetvault.schemas.asset import Asset, AssetPage, AssetQuery


def apply_cursor(stmt: Select, id_column, query: AssetQuery) -> Select:
    """Add the keyset predicate, ordering and limit for `query` to `stmt`."""
    if query.is_desc:
        stmt = stmt.where(id_column < query.last_id).order_by(id_column.desc())
    else:
        stmt = stmt.where(id_column > query.last_id).order_by(id_column.asc())
    return stmt.limit(query.limit)


def build_page(query: AssetQuery, assets: Sequence[Asset]) -> AssetPage:
    """Wrap ordered assets into a page whose bounds are the returned ids."""
    first_id, last_id = page_bounds([a.id for a in assets])
    return AssetPage(
        first_id=first_id,
        last_id=last_id,
        limit=query.limit,
        type=query.type,
        assets=list(assets),
    )
