"""Payload builders shared by service tests."""

from assetvault.core.domain_types import AssetType, Gender
from assetvault.schemas.asset import (
    AudiencePayload, ChartData, ChartPayload, InsightPayload,
)


def make_insight(description: str = "bla bla") -> InsightPayload:
    return InsightPayload(
        text="40% of millenials spend more than 3hours on social media daily",
        description=description,
    )


def make_chart(description: str = "bla bla") -> ChartPayload:
    return ChartPayload(
        title="Relationship between tax and GDP",
        description=description,
        x_title="GDP",
        y_title="Tax",
        data=ChartData(x=[1, 2, 3, 4, 5], y=[1, 2, 3, 4, 5]),
    )


def make_audience(description: str = "bla bla") -> AudiencePayload:
    return AudiencePayload(
        age_min=20,
        age_max=30,
        gender=Gender.FEMALE,
        country="Sweden",
        hours_spent=3,
        number_of_purchases=3,
        description=description,
    )


BUILDERS = {
    AssetType.INSIGHT: make_insight,
    AssetType.CHART: make_chart,
    AssetType.AUDIENCE: make_audience,
}
