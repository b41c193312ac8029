"""Deployment request and attempt-stage types."""

import enum

from pydantic import BaseModel, ConfigDict


class DeploymentStage(str, enum.Enum):
    """Stages of a single live deployment attempt, in order."""

    IDLE = "idle"
    CONNECTIVITY_CHECKED = "connectivity_checked"
    BALANCE_CHECKED = "balance_checked"
    PROCESS_LAUNCHED = "process_launched"
    PROCESS_SUCCEEDED = "process_succeeded"
    PROCESS_FAILED = "process_failed"
    ADDRESS_EXTRACTED = "address_extracted"
    ADDRESS_NOT_FOUND = "address_not_found"


class DeploymentRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    asset_id: str           # bytes32 hex, 0x-prefixed
    name: str
    symbol: str
    total_supply_units: int  # whole tokens; the deploy script scales to 18 decimals
    metadata_hash: str

    def to_env(self, owner_address: str) -> dict[str, str]:
        """Environment variables consumed by the deployment script."""
        return {
            "TOKEN_NAME": self.name,
            "TOKEN_SYMBOL": self.symbol,
            "ASSET_ID": self.asset_id,
            "METADATA_HASH": self.metadata_hash,
            "INITIAL_SUPPLY": str(self.total_supply_units),
            "OWNER_ADDRESS": owner_address,
        }
