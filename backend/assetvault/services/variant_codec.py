"""Variant Codec — lossless payload <-> row conversion and the AssetType registry.

Invariants:
    - Every AssetType has exactly one Variant: asset table, favourite table, payload class
    - to_payload(new_row(p)) == p for every payload p (values pass through unchanged)
    - No business rules: no range checks, no len(x) == len(y) check on charts
    - Anything outside the closed set raises UnknownAssetTypeError, never KeyError

Design Decisions:
    - Explicit registry dict over getattr or isinstance chains: every mapping visible
      in one place, adding a variant means editing VARIANTS
    - parse_payload is the only path for untyped data; the pydantic discriminator
      rejects unknown `kind` values before any dispatch happens
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic import BaseModel, TypeAdapter, ValidationError

from assetvault.core.domain_types import AssetType, Gender
from assetvault.core.errors import AssetValidationError, UnknownAssetTypeError
from assetvault.db.base import Base
from assetvault.models import (
    Audience, Chart, FavouriteAudience, FavouriteChart, FavouriteInsight, Insight,
)
from assetvault.schemas.asset import (
    Asset, AssetPayload, AudiencePayload, ChartData, ChartPayload, InsightPayload,
)

_PAYLOAD_ADAPTER = TypeAdapter(AssetPayload)


# ─── Per-variant field mapping ───────────────────────────────────

def _apply_insight(row: Insight, payload: InsightPayload) -> None:
    row.text = payload.text
    row.description = payload.description


def _insight_payload(row: Insight) -> InsightPayload:
    return InsightPayload(text=row.text, description=row.description)


def _apply_chart(row: Chart, payload: ChartPayload) -> None:
    row.title = payload.title
    row.description = payload.description
    row.x_title = payload.x_title
    row.y_title = payload.y_title
    row.data_json = {"x": list(payload.data.x), "y": list(payload.data.y)}


def _chart_payload(row: Chart) -> ChartPayload:
    data = row.data_json or {}
    return ChartPayload(
        title=row.title,
        description=row.description,
        x_title=row.x_title,
        y_title=row.y_title,
        data=ChartData(x=data.get("x", []), y=data.get("y", [])),
    )


def _apply_audience(row: Audience, payload: AudiencePayload) -> None:
    row.age_min = payload.age_min
    row.age_max = payload.age_max
    row.gender = payload.gender.value
    row.country = payload.country
    row.hours_spent = payload.hours_spent
    row.number_of_purchases = payload.number_of_purchases
    row.description = payload.description


def _audience_payload(row: Audience) -> AudiencePayload:
    return AudiencePayload(
        age_min=row.age_min,
        age_max=row.age_max,
        gender=Gender(row.gender),
        country=row.country,
        hours_spent=row.hours_spent,
        number_of_purchases=row.number_of_purchases,
        description=row.description,
    )


# ─── Registry ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Variant:
    """Everything needed to persist, load and favourite one asset type."""
    asset_type: AssetType
    model: type[Base]
    favourite_model: type[Base]
    favourite_column: str
    payload_class: type[BaseModel]
    apply: Callable[[Any, Any], None]
    to_payload: Callable[[Any], BaseModel]

    @property
    def favourite_asset_id(self):
        """Column on the favourite table holding the asset id."""
        return getattr(self.favourite_model, self.favourite_column)

    def new_row(self, payload: BaseModel):
        row = self.model()
        self.apply(row, payload)
        return row

    def new_mark(self, user_id: int, asset_id: int):
        return self.favourite_model(
            user_id=user_id, **{self.favourite_column: asset_id},
        )

    def to_asset(self, row, is_favourite: bool | None = None) -> Asset:
        return Asset(
            id=row.id,
            type=self.asset_type,
            payload=self.to_payload(row),
            is_favourite=is_favourite,
        )


VARIANTS: dict[AssetType, Variant] = {
    AssetType.INSIGHT: Variant(
        AssetType.INSIGHT, Insight, FavouriteInsight, "insight_id",
        InsightPayload, _apply_insight, _insight_payload,
    ),
    AssetType.CHART: Variant(
        AssetType.CHART, Chart, FavouriteChart, "chart_id",
        ChartPayload, _apply_chart, _chart_payload,
    ),
    AssetType.AUDIENCE: Variant(
        AssetType.AUDIENCE, Audience, FavouriteAudience, "audience_id",
        AudiencePayload, _apply_audience, _audience_payload,
    ),
}

_BY_PAYLOAD: dict[type, Variant] = {v.payload_class: v for v in VARIANTS.values()}


def variant_for_type(value: object) -> Variant:
    """Resolve an AssetType (or its string value) to its Variant."""
    try:
        asset_type = AssetType(value)
    except ValueError:
        raise UnknownAssetTypeError(value) from None
    return VARIANTS[asset_type]


def variant_for_payload(payload: object) -> Variant:
    """Resolve a payload instance to its Variant by concrete class."""
    variant = _BY_PAYLOAD.get(type(payload))
    if variant is None:
        raise UnknownAssetTypeError(type(payload).__name__)
    return variant


def parse_payload(data: Mapping[str, Any]) -> AssetPayload:
    """Validate untyped data into one of the payload variants."""
    try:
        return _PAYLOAD_ADAPTER.validate_python(data)
    except ValidationError as e:
        for err in e.errors():
            if err["type"] in ("union_tag_invalid", "union_tag_not_found"):
                raise UnknownAssetTypeError(data.get("kind")) from None
        first = e.errors()[0]
        raise AssetValidationError(
            first["msg"], ".".join(str(loc) for loc in first["loc"]),
        ) from None
