"""Read-only chain access used before a live deployment."""

from __future__ import annotations

import asyncio

from web3 import Web3


class ChainClient:
    """Thin wrapper over a web3 HTTP provider; blocking calls run off the event loop."""

    def __init__(self, rpc_url: str, timeout: float = 10.0) -> None:
        self.rpc_url = rpc_url
        self._w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))

    def account_address(self, private_key: str) -> str:
        return self._w3.eth.account.from_key(private_key).address

    async def client_version(self) -> str:
        return await asyncio.to_thread(lambda: self._w3.client_version)

    async def get_balance(self, address: str) -> int:
        """Balance in wei at the latest block."""
        return await asyncio.to_thread(self._w3.eth.get_balance, address)
