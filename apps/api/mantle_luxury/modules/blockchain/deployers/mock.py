"""Mock deployer: deterministic addresses, no network access."""

from __future__ import annotations

import hashlib

import structlog

from mantle_luxury.modules.blockchain.deployers.base import ContractDeployer
from mantle_luxury.modules.blockchain.schemas import DeploymentRequest

logger = structlog.get_logger()


def mock_address(asset_id: str) -> str:
    """Stable pseudo-address: first 40 hex chars of sha256(asset_id)."""
    return "0x" + hashlib.sha256(asset_id.encode()).hexdigest()[:40]


class MockDeployer(ContractDeployer):
    mode = "mock"

    async def deploy(self, request: DeploymentRequest) -> str:
        address = mock_address(request.asset_id)
        logger.warning(
            "blockchain.deploy.mock",
            msg="Blockchain deployment is disabled; returning mock address",
            asset_id=request.asset_id,
            address=address,
        )
        return address
