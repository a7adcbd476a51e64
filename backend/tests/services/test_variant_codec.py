"""Variant Codec — payload parsing, registry lookups, row mapping.

Tests:
    - parse_payload picks the variant from `kind`
    - Unknown or missing `kind` -> UnknownAssetTypeError
    - Missing required field -> AssetValidationError naming the field
    - Every AssetType resolves to exactly one Variant
    - new_row / to_asset pass values through unchanged (no range checks)
"""

import pytest

from assetvault.core.domain_types import AssetType, Gender
from assetvault.core.errors import AssetValidationError, UnknownAssetTypeError
from assetvault.models import Audience, FavouriteChart
from assetvault.schemas.asset import AudiencePayload, ChartPayload, InsightPayload
from assetvault.services.variant_codec import (
    VARIANTS, parse_payload, variant_for_payload, variant_for_type,
)

from tests.services.payloads import BUILDERS, make_audience


def test_parse_insight():
    payload = parse_payload({"kind": "insight", "text": "t", "description": "d"})
    assert isinstance(payload, InsightPayload)
    assert payload.text == "t"


def test_parse_chart_with_series():
    payload = parse_payload({
        "kind": "chart",
        "title": "GDP",
        "data": {"x": [1, 2], "y": [3]},
    })
    assert isinstance(payload, ChartPayload)
    assert payload.data.x == [1.0, 2.0]
    assert payload.data.y == [3.0]


def test_parse_audience_gender():
    payload = parse_payload({
        "kind": "audience", "age_min": 20, "age_max": 30, "gender": "female",
    })
    assert isinstance(payload, AudiencePayload)
    assert payload.gender == Gender.FEMALE


@pytest.mark.parametrize("data", [
    {"kind": "video", "text": "t"},
    {"text": "no kind at all"},
])
def test_parse_unknown_kind(data):
    with pytest.raises(UnknownAssetTypeError) as exc:
        parse_payload(data)
    assert exc.value.value == data.get("kind")
    assert exc.value.code == "UNKNOWN_ASSET_TYPE"


def test_parse_missing_field():
    with pytest.raises(AssetValidationError) as exc:
        parse_payload({"kind": "audience", "age_min": 20})
    assert "age_max" in exc.value.field


def test_registry_covers_every_type():
    assert set(VARIANTS) == set(AssetType)
    for asset_type, variant in VARIANTS.items():
        assert variant.asset_type == asset_type
        assert variant_for_type(asset_type.value) is variant
        assert variant_for_payload(BUILDERS[asset_type]()) is variant


def test_variant_for_payload_rejects_other_objects():
    with pytest.raises(UnknownAssetTypeError):
        variant_for_payload("insight")


def test_new_mark_sets_the_type_specific_column():
    mark = VARIANTS[AssetType.CHART].new_mark(7, 11)
    assert isinstance(mark, FavouriteChart)
    assert mark.user_id == 7
    assert mark.chart_id == 11


def test_rows_carry_values_without_range_checks():
    payload = make_audience()
    payload.age_min = 90
    payload.age_max = 10
    variant = variant_for_type(AssetType.AUDIENCE)

    row = variant.new_row(payload)
    row.id = 5
    asset = variant.to_asset(row, is_favourite=True)

    assert isinstance(row, Audience)
    assert row.gender == "female"
    assert asset.id == 5
    assert asset.payload == payload
    assert asset.is_favourite is True
