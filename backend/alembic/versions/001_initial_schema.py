"""Initial schema — insights, charts, audiences and their favourite tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Favourite tables carry no foreign key to their asset table: asset deletion
must not fail or cascade while marks still exist (remove_from_everyone
cleans them up explicitly).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# (favourite table, asset id column, unique constraint)
_FAVOURITE_TABLES = [
    ("favourite_insights", "insight_id", "uq_favourite_insight"),
    ("favourite_charts", "chart_id", "uq_favourite_chart"),
    ("favourite_audiences", "audience_id", "uq_favourite_audience"),
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "insights",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("text", sa.Text, nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "charts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("x_title", sa.String(200), nullable=False, server_default=""),
        sa.Column("y_title", sa.String(200), nullable=False, server_default=""),
        sa.Column("data_json", sa.JSON, nullable=False),
        *_timestamps(),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "audiences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("age_min", sa.Integer, nullable=False, server_default="0"),
        sa.Column("age_max", sa.Integer, nullable=False, server_default="0"),
        sa.Column("gender", sa.String(10), nullable=False, server_default="other"),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("hours_spent", sa.Float, nullable=False, server_default="0"),
        sa.Column("number_of_purchases", sa.Integer, nullable=False, server_default="0"),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
        sqlite_autoincrement=True,
    )

    for table, column, constraint in _FAVOURITE_TABLES:
        op.create_table(
            table,
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column("user_id", sa.Integer, nullable=False),
            sa.Column(column, sa.Integer, nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.UniqueConstraint("user_id", column, name=constraint),
            sqlite_autoincrement=True,
        )
        op.create_index(f"ix_{table}_user_id", table, ["user_id"])
        op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    for table, column, _ in reversed(_FAVOURITE_TABLES):
        op.drop_index(f"ix_{table}_{column}", table_name=table)
        op.drop_index(f"ix_{table}_user_id", table_name=table)
        op.drop_table(table)
    op.drop_table("audiences")
    op.drop_table("charts")
    op.drop_table("insights")
