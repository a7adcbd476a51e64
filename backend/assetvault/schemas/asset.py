"""Asset Schemas — Pydantic models for payload variants, assets, queries and pages.

Invariants:
    - AssetPayload is a tagged union discriminated by `kind` (one of AssetType)
    - ChartData does NOT enforce len(x) == len(y): payloads pass through unchanged
    - Asset.is_favourite is None unless produced by the favourite-aware listing
    - AssetQuery.limit > 0, AssetQuery.last_id >= 0
    - AssetPage.first_id / last_id are 0 when the page is empty

Design Decisions:
    - Literal enum discriminator over isinstance dispatch: pydantic picks the variant
      when parsing untyped data, and the type checker sees an exhaustive union
    - Schemas are the domain contract; ORM rows never leave the services package
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from assetvault.core.domain_types import AssetType, Gender


class InsightPayload(BaseModel):
    """Free-text insight."""
    kind: Literal[AssetType.INSIGHT] = AssetType.INSIGHT
    text: str
    description: str = ""


class ChartData(BaseModel):
    """Ordered X/Y series."""
    x: list[float] = Field(default_factory=list)
    y: list[float] = Field(default_factory=list)


class ChartPayload(BaseModel):
    """Chart with axis titles and a single X/Y series."""
    kind: Literal[AssetType.CHART] = AssetType.CHART
    title: str
    description: str = ""
    x_title: str = ""
    y_title: str = ""
    data: ChartData = Field(default_factory=ChartData)


class AudiencePayload(BaseModel):
    """Audience segment characteristics."""
    kind: Literal[AssetType.AUDIENCE] = AssetType.AUDIENCE
    age_min: int
    age_max: int
    gender: Gender = Gender.OTHER
    country: str = ""
    hours_spent: float = 0.0
    number_of_purchases: int = 0
    description: str = ""


AssetPayload = Annotated[
    Union[InsightPayload, ChartPayload, AudiencePayload],
    Field(discriminator="kind"),
]


class Asset(BaseModel):
    """A stored asset of any variant."""
    id: int
    type: AssetType
    payload: AssetPayload
    is_favourite: bool | None = None


class AssetQuery(BaseModel):
    """Keyset page request. last_id=0 means no cursor (ascending only)."""
    model_config = ConfigDict(frozen=True)

    limit: int = Field(gt=0)
    last_id: int = Field(0, ge=0)
    type: AssetType
    is_desc: bool = False


class AssetPage(BaseModel):
    """One page of assets plus the cursors needed to fetch the next one."""
    first_id: int = 0
    last_id: int = 0
    limit: int
    type: AssetType
    assets: list[Asset] = Field(default_factory=list)


class FavouriteMark(BaseModel):
    """A user's favourite mark on one asset."""
    id: int
    user_id: int
    asset_id: int
    asset_type: AssetType
