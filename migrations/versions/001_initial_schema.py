"""Initial schema with PostGIS extension, airports and restaurants.

Revision ID: 001
Create Date: 2024-11-24
"""

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geography


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Enable PostGIS extension
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    # ── airports ──────────────────────────────────────────────────────
    op.create_table(
        "airports",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(10), unique=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(10), nullable=True),
        sa.Column("country", sa.String(10), nullable=False, server_default="US"),
        sa.Column(
            "location",
            Geography("POINT", srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_airports_location",
        "airports",
        ["location"],
        postgresql_using="gist",
    )

    # ── restaurants ───────────────────────────────────────────────────
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("google_place_id", sa.String(255), unique=True, nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("cuisine", sa.String(100), nullable=True),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(10), nullable=True),
        sa.Column("country", sa.String(10), nullable=False, server_default="US"),
        sa.Column(
            "location",
            Geography("POINT", srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_restaurants_location",
        "restaurants",
        ["location"],
        postgresql_using="gist",
    )
    op.create_index("idx_restaurants_rating", "restaurants", ["rating"])


def downgrade() -> None:
    op.drop_table("restaurants")
    op.drop_table("airports")
