"""Domain enums for the asset models."""

import enum


class AssetStatus(str, enum.Enum):
    """Lifecycle of a tokenized asset; progression is forward-only."""

    REGISTERED = "registered"
    FUNDRAISING = "fundraising"
    FUNDED = "funded"
    SOLD = "sold"
