"""SQLAlchemy models package: import all models so Base.metadata is populated."""

from mantle_luxury.models.assets import Asset
from mantle_luxury.models.base import BaseModel, ModelMixin
from mantle_luxury.models.enums import AssetStatus

__all__ = [
    "Asset",
    "AssetStatus",
    "BaseModel",
    "ModelMixin",
]
