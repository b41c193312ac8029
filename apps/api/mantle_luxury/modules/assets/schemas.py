"""Asset submission and catalog schemas."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Mirrors the column widths on Asset so oversized input is rejected before any deploy
_AMOUNT = {"ge": 0, "max_digits": 36, "decimal_places": 18}


class AssetSubmitRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    asset_type: str = Field(max_length=50)  # watch, jewelry
    brand: str | None = Field(None, max_length=100)
    model: str | None = Field(None, max_length=100)
    year: int | None = Field(None, ge=1, le=9999)
    description: str | None = None
    purchase_price: Decimal | None = Field(None, **_AMOUNT)
    purchase_date: date | None = None
    serial_number: str | None = Field(None, max_length=200)
    total_supply: Decimal | None = Field(None, **_AMOUNT)  # number of shares
    price_per_share: Decimal | None = Field(None, **_AMOUNT)
    submitted_by: str | None = Field(None, max_length=42)  # wallet address or user id


class AssetResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID
    asset_type: str
    brand: str | None
    model: str | None
    year: int | None
    price_per_share: Decimal | None
    total_supply: Decimal | None
    remaining_supply: Decimal  # computed
    status: str                # registered, fundraising, funded, sold
    token_address: str | None
    asset_id_bytes32: str
    created_at: datetime
