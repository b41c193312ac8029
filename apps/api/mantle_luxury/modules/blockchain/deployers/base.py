"""Contract deployer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mantle_luxury.modules.blockchain.schemas import DeploymentRequest


class ContractDeployer(ABC):
    """Deploys one token contract per request and returns its address."""

    mode: str = ""

    @abstractmethod
    async def deploy(self, request: DeploymentRequest) -> str:
        """Deploy the token and return its 0x-prefixed contract address.

        Raises DeploymentError (or a subclass) on any failure.
        """
        ...
