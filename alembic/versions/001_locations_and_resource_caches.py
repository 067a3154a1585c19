"""Create locations and the per-kind resource cache tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

_RESOURCE_TABLES = ("weathers", "events", "movies", "yelps")


def _resource_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("search_query", sa.String(500), nullable=False),
        sa.Column("formatted_query", sa.String(), nullable=False),
        sa.Column("latitude", sa.Double(), nullable=False),
        sa.Column("longitude", sa.Double(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_locations"),
    )
    op.create_index("ix_locations_search_query", "locations", ["search_query"])

    op.create_table(
        "weathers",
        *_resource_columns(),
        sa.Column("forecast", sa.Text(), nullable=False),
        sa.Column("time", sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_weathers"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], name="fk_weathers_location_id_locations"),
    )
    op.create_table(
        "events",
        *_resource_columns(),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("event_date", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_events"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], name="fk_events_location_id_locations"),
    )
    op.create_table(
        "movies",
        *_resource_columns(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("released_on", sa.Text(), nullable=True),
        sa.Column("total_votes", sa.Integer(), nullable=True),
        sa.Column("average_votes", sa.Double(), nullable=True),
        sa.Column("popularity", sa.Double(), nullable=True),
        sa.Column("overview", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_movies"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], name="fk_movies_location_id_locations"),
    )
    op.create_table(
        "yelps",
        *_resource_columns(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("rating", sa.Double(), nullable=True),
        sa.Column("price", sa.Text(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_yelps"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], name="fk_yelps_location_id_locations"),
    )
    for table in _RESOURCE_TABLES:
        op.create_index(f"ix_{table}_location_id", table, ["location_id"])


def downgrade() -> None:
    for table in _RESOURCE_TABLES:
        op.drop_index(f"ix_{table}_location_id", table_name=table)
        op.drop_table(table)
    op.drop_index("ix_locations_search_query", table_name="locations")
    op.drop_table("locations")
