"""Token deployment gateway: one stable deploy_token call over the configured deployer."""

from __future__ import annotations

from functools import lru_cache

import structlog

from mantle_luxury.core.config import settings
from mantle_luxury.modules.blockchain.config import BlockchainConfig
from mantle_luxury.modules.blockchain.deployers.base import ContractDeployer
from mantle_luxury.modules.blockchain.deployers.live import SubprocessDeployer
from mantle_luxury.modules.blockchain.deployers.mock import MockDeployer
from mantle_luxury.modules.blockchain.rpc import ChainClient
from mantle_luxury.modules.blockchain.schemas import DeploymentRequest

logger = structlog.get_logger()


def build_deployer(config: BlockchainConfig, chain: ChainClient | None = None) -> ContractDeployer:
    """Pick the live or mock deployer from ``config.enabled``."""
    if config.enabled:
        return SubprocessDeployer(config, chain)
    return MockDeployer()


class TokenDeploymentService:
    """Pass-through to a deployer chosen once, at construction."""

    def __init__(
        self,
        config: BlockchainConfig,
        deployer: ContractDeployer | None = None,
    ) -> None:
        self.config = config
        self.deployer = deployer or build_deployer(config)
        logger.info("blockchain.gateway.ready", mode=self.mode)

    @property
    def mode(self) -> str:
        return self.deployer.mode

    async def deploy_token(
        self,
        asset_id: str,
        name: str,
        symbol: str,
        total_supply_units: int,
        metadata_hash: str,
    ) -> str:
        """Deploy a LuxuryToken contract and return its address.

        Args:
            asset_id: bytes32 asset id (0x + 64 hex)
            name: token name
            symbol: token symbol
            total_supply_units: whole-token supply
            metadata_hash: bytes32 metadata hash
        """
        request = DeploymentRequest(
            asset_id=asset_id,
            name=name,
            symbol=symbol,
            total_supply_units=total_supply_units,
            metadata_hash=metadata_hash,
        )
        return await self.deployer.deploy(request)


@lru_cache(maxsize=1)
def get_token_deployment_service() -> TokenDeploymentService:
    """Process-wide gateway built from settings; override in tests."""
    return TokenDeploymentService(BlockchainConfig.from_settings(settings))
