"""Asset Repository — round-trip, id assignment, update/delete semantics, keyset listing.

Invariants:
    - Create then Get returns a structurally equal payload for every variant
    - Ids per type start at 1 and strictly increase; deleted ids are never reused
    - Ascending pages chained on last_id cover the table exactly once
    - Descending pages from max_id + 1 yield the reverse of the ascending traversal
    - Unknown types fail with UnknownAssetTypeError before touching the store
"""

import pytest

from assetvault.core.domain_types import AssetType
from assetvault.core.errors import (
    AssetNotFoundError, AssetValidationError, UnknownAssetTypeError,
)
from assetvault.schemas.asset import AssetQuery, ChartData, InsightPayload
from assetvault.services.asset_repository import SqlAssetRepository

from tests.services.payloads import BUILDERS, make_chart, make_insight


@pytest.fixture
def repo(test_db):
    return SqlAssetRepository(test_db)


async def _collect_pages(repo, asset_type, limit, is_desc=False, start=0):
    pages = []
    cursor = start
    while True:
        page = await repo.list(AssetQuery(
            limit=limit, last_id=cursor, type=asset_type, is_desc=is_desc,
        ))
        if not page.assets:
            break
        pages.append(page)
        cursor = page.last_id
    return pages


# -- Round trip ----------------------------------------------------------------

@pytest.mark.parametrize("asset_type", list(AssetType))
async def test_create_then_get_round_trips_payload(repo, asset_type):
    payload = BUILDERS[asset_type]("round trip")
    created = await repo.create(payload)

    fetched = await repo.get(asset_type, created.id)

    assert created.id == 1
    assert created.type == asset_type
    assert fetched.payload == payload
    assert created.payload == payload


async def test_plain_get_leaves_is_favourite_unknown(repo):
    created = await repo.create(make_insight())
    fetched = await repo.get(AssetType.INSIGHT, created.id)
    assert created.is_favourite is None
    assert fetched.is_favourite is None


async def test_chart_series_of_unequal_length_passes_through(repo):
    payload = make_chart()
    payload.data = ChartData(x=[1.5, 2.5, 3.5], y=[10.0])
    created = await repo.create(payload)

    fetched = await repo.get(AssetType.CHART, created.id)
    assert fetched.payload.data.x == [1.5, 2.5, 3.5]
    assert fetched.payload.data.y == [10.0]


# -- Id assignment -------------------------------------------------------------

async def test_ids_strictly_increase_from_one(repo):
    ids = [(await repo.create(make_insight(f"example {i}"))).id for i in range(1, 6)]
    assert ids == [1, 2, 3, 4, 5]


async def test_ids_are_scoped_per_type(repo):
    insight = await repo.create(make_insight())
    chart = await repo.create(make_chart())
    assert insight.id == 1
    assert chart.id == 1


async def test_deleted_max_id_is_not_reused(repo):
    await repo.create(make_insight())
    second = await repo.create(make_insight())
    await repo.delete(AssetType.INSIGHT, second.id)

    third = await repo.create(make_insight())
    assert third.id == 3


# -- Update --------------------------------------------------------------------

async def test_update_replaces_payload_and_keeps_id(repo):
    created = await repo.create(make_insight("before"))
    new_payload = InsightPayload(text="new text", description="after")

    updated = await repo.update(created.id, new_payload)
    fetched = await repo.get(AssetType.INSIGHT, created.id)

    assert updated.id == created.id
    assert fetched.payload == new_payload


async def test_update_missing_id_raises_not_found(repo):
    with pytest.raises(AssetNotFoundError) as exc:
        await repo.update(42, make_insight())
    assert exc.value.asset_id == 42
    assert await repo.count(AssetType.INSIGHT) == 0


async def test_update_rejects_non_positive_id(repo):
    with pytest.raises(AssetValidationError):
        await repo.update(0, make_insight())


async def test_update_type_is_inferred_from_payload(repo):
    await repo.create(make_insight())
    # id 1 exists for insights only; a chart payload targets the charts table
    with pytest.raises(AssetNotFoundError):
        await repo.update(1, make_chart())


# -- Get / delete --------------------------------------------------------------

async def test_get_missing_raises_not_found(repo):
    with pytest.raises(AssetNotFoundError) as exc:
        await repo.get(AssetType.AUDIENCE, 7)
    assert exc.value.http_status == 404
    assert exc.value.asset_type == "audience"


async def test_delete_is_hard(repo):
    created = await repo.create(make_insight())
    await repo.delete(AssetType.INSIGHT, created.id)

    with pytest.raises(AssetNotFoundError):
        await repo.get(AssetType.INSIGHT, created.id)
    assert await repo.count(AssetType.INSIGHT) == 0


async def test_delete_absent_id_is_noop(repo):
    await repo.delete(AssetType.CHART, 99)
    assert await repo.count(AssetType.CHART) == 0


@pytest.mark.parametrize("bad_type", ["video", 3, None])
async def test_unknown_type_rejected(repo, bad_type):
    with pytest.raises(UnknownAssetTypeError):
        await repo.get(bad_type, 1)
    with pytest.raises(UnknownAssetTypeError):
        await repo.delete(bad_type, 1)


async def test_unknown_payload_rejected(repo):
    with pytest.raises(UnknownAssetTypeError):
        await repo.create({"text": "not a payload model"})


async def test_string_type_value_accepted(repo):
    created = await repo.create(make_insight())
    fetched = await repo.get("insight", created.id)
    assert fetched.id == created.id


# -- Listing -------------------------------------------------------------------

async def test_ascending_pages_cover_all_ids_once(repo):
    for i in range(1, 24):
        await repo.create(make_insight(f"example {i}"))

    pages = await _collect_pages(repo, AssetType.INSIGHT, limit=5)
    ids = [a.id for p in pages for a in p.assets]

    assert ids == list(range(1, 24))
    assert [len(p.assets) for p in pages] == [5, 5, 5, 5, 3]
    assert all(p.first_id == p.assets[0].id for p in pages)
    assert all(p.last_id == p.assets[-1].id for p in pages)


async def test_descending_pages_reverse_ascending(repo):
    for i in range(1, 24):
        await repo.create(make_insight(f"example {i}"))
    max_id = await repo.max_id(AssetType.INSIGHT)

    asc = await _collect_pages(repo, AssetType.INSIGHT, limit=5)
    desc = await _collect_pages(
        repo, AssetType.INSIGHT, limit=5, is_desc=True, start=max_id + 1,
    )

    asc_ids = [a.id for p in asc for a in p.assets]
    desc_ids = [a.id for p in desc for a in p.assets]
    assert desc_ids == list(reversed(asc_ids))


async def test_descending_with_zero_cursor_is_empty(repo):
    await repo.create(make_insight())
    page = await repo.list(AssetQuery(
        limit=10, last_id=0, type=AssetType.INSIGHT, is_desc=True,
    ))
    assert page.assets == []


async def test_empty_page_has_zero_bounds(repo):
    page = await repo.list(AssetQuery(limit=10, type=AssetType.CHART))
    assert page.first_id == 0
    assert page.last_id == 0
    assert page.limit == 10
    assert page.type == AssetType.CHART


async def test_list_does_not_mix_types(repo):
    await repo.create(make_insight())
    await repo.create(make_chart())
    await repo.create(make_chart())

    page = await repo.list(AssetQuery(limit=10, type=AssetType.CHART))
    assert [a.type for a in page.assets] == [AssetType.CHART, AssetType.CHART]
    assert all(a.is_favourite is None for a in page.assets)


async def test_max_id_of_empty_table_is_zero(repo):
    assert await repo.max_id(AssetType.AUDIENCE) == 0
