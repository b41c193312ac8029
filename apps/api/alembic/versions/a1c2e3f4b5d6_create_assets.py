"""create_assets

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "a1c2e3f4b5d6"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "assets",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("asset_id_bytes32", sa.String(66), nullable=False),
        sa.Column("token_address", sa.String(42), nullable=True),
        sa.Column("metadata_hash", sa.String(66), nullable=True),
        sa.Column("custody_info_hash", sa.String(66), nullable=True),
        sa.Column("insurance_info_hash", sa.String(66), nullable=True),
        sa.Column("asset_type", sa.String(50), nullable=False),
        sa.Column("brand", sa.String(100), nullable=True),
        sa.Column("model", sa.String(100), nullable=True),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("purchase_price", sa.Numeric(36, 18), nullable=True),
        sa.Column("purchase_date", sa.Date, nullable=True),
        sa.Column("serial_number", sa.String(200), nullable=True),
        sa.Column("total_supply", sa.Numeric(36, 18), nullable=True),
        sa.Column("price_per_share", sa.Numeric(36, 18), nullable=True),
        sa.Column("status", sa.String(20), server_default="registered", nullable=False),
        sa.Column("submitted_by", sa.String(42), nullable=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("asset_id_bytes32", name="uq_assets_asset_id_bytes32"),
    )
    op.create_index("ix_assets_status", "assets", ["status"])
    op.create_index("ix_assets_asset_type", "assets", ["asset_type"])
    op.create_index("ix_assets_submitted_by", "assets", ["submitted_by"])


def downgrade() -> None:
    op.drop_index("ix_assets_submitted_by", table_name="assets")
    op.drop_index("ix_assets_asset_type", table_name="assets")
    op.drop_index("ix_assets_status", table_name="assets")
    op.drop_table("assets")
