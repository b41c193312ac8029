"""Deployment configuration resolved once from application settings."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from mantle_luxury.core.config import Settings

# Hardhat's well-known first development key; only for mock mode and local nodes.
DEV_PRIVATE_KEY = "0x" + "0" * 63 + "1"


class BlockchainConfig(BaseModel):
    """Immutable deployment settings injected into the deployment gateway."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    rpc_url: str = "http://localhost:8545"
    private_key: str = Field(default="", repr=False)
    network: str = "mantleTestnet"
    min_balance: Decimal = Decimal("0.001")
    faucet_url: str = "https://faucet.testnet.mantle.xyz/"
    contracts_dirs: tuple[str, ...] = ("contracts", "../contracts")
    deploy_script: str = "scripts/deployLuxuryToken.ts"
    deploy_timeout_seconds: float = 300.0
    compile_timeout_seconds: float = 120.0
    rpc_timeout_seconds: float = 10.0
    # Command prefixes; None means the Hardhat defaults below
    compile_command: tuple[str, ...] | None = None
    deploy_command: tuple[str, ...] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> BlockchainConfig:
        return cls(
            enabled=settings.BLOCKCHAIN_ENABLED,
            rpc_url=settings.BLOCKCHAIN_RPC_URL,
            private_key=settings.BLOCKCHAIN_PRIVATE_KEY,
            network=settings.BLOCKCHAIN_NETWORK,
            min_balance=settings.BLOCKCHAIN_MIN_BALANCE,
            faucet_url=settings.BLOCKCHAIN_FAUCET_URL,
            contracts_dirs=tuple(settings.BLOCKCHAIN_CONTRACTS_DIRS),
            deploy_script=settings.BLOCKCHAIN_DEPLOY_SCRIPT,
            deploy_timeout_seconds=settings.BLOCKCHAIN_DEPLOY_TIMEOUT_SECONDS,
            compile_timeout_seconds=settings.BLOCKCHAIN_COMPILE_TIMEOUT_SECONDS,
            rpc_timeout_seconds=settings.BLOCKCHAIN_RPC_TIMEOUT_SECONDS,
        )

    @property
    def signing_key(self) -> str:
        return self.private_key or DEV_PRIVATE_KEY

    def resolved_compile_command(self) -> list[str]:
        return list(self.compile_command or ("npx", "hardhat", "compile"))

    def resolved_deploy_command(self) -> list[str]:
        if self.deploy_command:
            return list(self.deploy_command)
        return ["npx", "hardhat", "run", self.deploy_script, "--network", self.network]
