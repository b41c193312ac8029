"""Asset store: durable keyed storage for asset records."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mantle_luxury.models.assets import Asset
from mantle_luxury.models.enums import AssetStatus


class AssetRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save(self, asset: Asset) -> Asset:
        """Insert or update one asset atomically; returns it with id and timestamps."""
        self.db.add(asset)
        await self.db.commit()
        await self.db.refresh(asset)
        return asset

    async def find_by_id(self, asset_id: uuid.UUID) -> Asset | None:
        return await self.db.get(Asset, asset_id)

    async def find_all(
        self,
        status: AssetStatus | None = None,
        asset_type: str | None = None,
        submitted_by: str | None = None,
    ) -> list[Asset]:
        """All assets, newest first, optionally narrowed by any combination of filters."""
        stmt = select(Asset)
        if status is not None:
            stmt = stmt.where(Asset.status == status)
        if asset_type is not None:
            stmt = stmt.where(Asset.asset_type == asset_type)
        if submitted_by is not None:
            stmt = stmt.where(Asset.submitted_by == submitted_by)
        stmt = stmt.order_by(Asset.created_at.desc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def find_by_asset_id_bytes32(self, asset_id_bytes32: str) -> Asset | None:
        stmt = select(Asset).where(Asset.asset_id_bytes32 == asset_id_bytes32)
        return (await self.db.execute(stmt)).scalar_one_or_none()

    async def find_by_status(self, status: AssetStatus) -> list[Asset]:
        return await self.find_all(status=status)

    async def find_by_asset_type(self, asset_type: str) -> list[Asset]:
        return await self.find_all(asset_type=asset_type)

    async def find_by_submitted_by(self, submitted_by: str) -> list[Asset]:
        return await self.find_all(submitted_by=submitted_by)
