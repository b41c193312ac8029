"""Tokenized physical asset model."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Enum, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mantle_luxury.models.base import BaseModel
from mantle_luxury.models.enums import AssetStatus


class Asset(BaseModel):
    """A physical asset whose fractional ownership is represented by an on-chain token.

    A row only exists once its token contract has been deployed, so
    ``token_address`` is populated for every asset in ``fundraising`` or later.
    """

    __tablename__ = "assets"

    # On-chain correlation key, independent of the primary key
    asset_id_bytes32: Mapped[str] = mapped_column(String(66), unique=True, nullable=False)
    token_address: Mapped[str | None] = mapped_column(String(42), nullable=True)
    metadata_hash: Mapped[str | None] = mapped_column(String(66), nullable=True)
    custody_info_hash: Mapped[str | None] = mapped_column(String(66), nullable=True)
    insurance_info_hash: Mapped[str | None] = mapped_column(String(66), nullable=True)

    asset_type: Mapped[str] = mapped_column(String(50), nullable=False)  # watch, jewelry
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    year: Mapped[int | None] = mapped_column(nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_price: Mapped[Decimal | None] = mapped_column(nullable=True)
    purchase_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String(200), nullable=True)

    total_supply: Mapped[Decimal | None] = mapped_column(nullable=True)
    price_per_share: Mapped[Decimal | None] = mapped_column(nullable=True)

    status: Mapped[AssetStatus] = mapped_column(
        Enum(
            AssetStatus,
            name="asset_status",
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=AssetStatus.REGISTERED,
    )
    submitted_by: Mapped[str | None] = mapped_column(String(42), nullable=True)  # wallet address or user id

    __table_args__ = (
        Index("ix_assets_status", "status"),
        Index("ix_assets_asset_type", "asset_type"),
        Index("ix_assets_submitted_by", "submitted_by"),
    )
