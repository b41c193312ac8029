"""Live deployer: checks the chain, then runs the Hardhat deploy script as a child process.

Attempt stages: idle → connectivity checked → balance checked → process
launched → process succeeded/failed → address extracted/not found. Any error
ends the attempt; nothing here retries.
"""

from __future__ import annotations

import asyncio
import os
import signal
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

import structlog
from web3 import Web3

from mantle_luxury.modules.blockchain.config import BlockchainConfig
from mantle_luxury.modules.blockchain.deployers.base import ContractDeployer
from mantle_luxury.modules.blockchain.exceptions import (
    AddressNotFoundError,
    ContractsProjectNotFoundError,
    DeploymentProcessFailedError,
    DeploymentTimedOutError,
    InsufficientFundsError,
    RpcUnreachableError,
)
from mantle_luxury.modules.blockchain.output import extract_contract_address
from mantle_luxury.modules.blockchain.rpc import ChainClient
from mantle_luxury.modules.blockchain.schemas import DeploymentRequest, DeploymentStage

logger = structlog.get_logger()

_READ_CHUNK = 64 * 1024


async def _kill_process_group(process: asyncio.subprocess.Process) -> None:
    """SIGKILL the child's whole session (npx spawns hardhat as a grandchild), then reap."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    await process.wait()


async def run_streaming(
    command: list[str],
    *,
    cwd: Path,
    env: dict[str, str],
    timeout: float,
    on_line: Callable[[str], None],
) -> tuple[int, str]:
    """Run ``command`` with stderr merged into stdout, feeding each line to ``on_line``.

    Returns (exit_code, full output). The child runs in its own session; if it
    outlives ``timeout`` or its output cannot be read, every process in that
    session is killed before DeploymentTimedOutError or
    DeploymentProcessFailedError is raised. OSError if it cannot start.
    """
    process = await asyncio.create_subprocess_exec(
        *command,
        cwd=str(cwd),
        env=env,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
        start_new_session=True,
    )
    lines: list[str] = []

    def _emit(raw: bytes) -> None:
        line = raw.decode("utf-8", errors="replace").rstrip("\r")
        lines.append(line)
        on_line(line)

    async def _pump() -> int:
        if process.stdout is None:
            raise DeploymentProcessFailedError(None, "child output is not piped")
        pending = b""
        while True:
            chunk = await process.stdout.read(_READ_CHUNK)
            if not chunk:
                break
            *complete, pending = (pending + chunk).split(b"\n")
            for raw in complete:
                _emit(raw)
        if pending:
            _emit(pending)
        return await process.wait()

    try:
        exit_code = await asyncio.wait_for(_pump(), timeout=timeout)
    except asyncio.TimeoutError:
        await _kill_process_group(process)
        raise DeploymentTimedOutError(timeout, "\n".join(lines))
    except DeploymentProcessFailedError:
        await _kill_process_group(process)
        raise
    except Exception as exc:
        await _kill_process_group(process)
        raise DeploymentProcessFailedError(None, f"output stream failed: {exc}") from exc
    except BaseException:
        await _kill_process_group(process)
        raise
    return exit_code, "\n".join(lines)


class SubprocessDeployer(ContractDeployer):
    mode = "live"

    def __init__(self, config: BlockchainConfig, chain: ChainClient | None = None) -> None:
        self.config = config
        self.chain = chain or ChainClient(config.rpc_url, timeout=config.rpc_timeout_seconds)
        self.owner_address = self.chain.account_address(config.signing_key)

    async def deploy(self, request: DeploymentRequest) -> str:
        log = logger.bind(asset_id=request.asset_id, symbol=request.symbol)
        log.info(
            "blockchain.deploy.start",
            name=request.name,
            supply=request.total_supply_units,
            rpc_url=self.config.rpc_url,
            network=self.config.network,
        )

        await self._check_connectivity()
        await self._check_balance()

        contracts_dir = self._find_contracts_directory()
        await self._compile(contracts_dir)

        env = os.environ.copy()
        env.update(request.to_env(self.owner_address))
        command = self.config.resolved_deploy_command()
        log.info("blockchain.deploy.launch", command=" ".join(command), cwd=str(contracts_dir))
        try:
            exit_code, output = await run_streaming(
                command,
                cwd=contracts_dir,
                env=env,
                timeout=self.config.deploy_timeout_seconds,
                on_line=lambda line: log.info("blockchain.deploy.output", line=line),
            )
        except OSError as exc:
            raise DeploymentProcessFailedError(None, str(exc)) from exc

        if exit_code != 0:
            log.error("blockchain.deploy.process_failed", exit_code=exit_code)
            raise DeploymentProcessFailedError(exit_code, output)

        address = extract_contract_address(output)
        if not address:
            log.error("blockchain.deploy.address_not_found")
            raise AddressNotFoundError(output)

        log.info("blockchain.deploy.complete", address=address, stage=DeploymentStage.ADDRESS_EXTRACTED.value)
        return address

    async def _check_connectivity(self) -> None:
        try:
            client_version = await asyncio.wait_for(
                self.chain.client_version(), timeout=self.config.rpc_timeout_seconds
            )
        except Exception as exc:
            logger.error("blockchain.rpc.unreachable", rpc_url=self.config.rpc_url, error=str(exc))
            raise RpcUnreachableError(self.config.rpc_url, str(exc) or type(exc).__name__) from exc
        logger.info("blockchain.rpc.connected", client_version=client_version)

    async def _check_balance(self) -> None:
        try:
            balance_wei = await asyncio.wait_for(
                self.chain.get_balance(self.owner_address), timeout=self.config.rpc_timeout_seconds
            )
        except Exception as exc:
            raise RpcUnreachableError(self.config.rpc_url, str(exc) or type(exc).__name__) from exc

        balance = Decimal(Web3.from_wei(balance_wei, "ether"))
        logger.info("blockchain.balance", address=self.owner_address, balance_mnt=str(balance))
        if balance_wei < Web3.to_wei(self.config.min_balance, "ether"):
            raise InsufficientFundsError(balance, self.config.min_balance, self.config.faucet_url)

    def _find_contracts_directory(self) -> Path:
        for candidate in self.config.contracts_dirs:
            path = Path(candidate)
            if path.is_dir():
                return path.resolve()
        raise ContractsProjectNotFoundError(self.config.contracts_dirs)

    async def _compile(self, contracts_dir: Path) -> None:
        """Best-effort compile; failures are logged and the deploy still runs."""
        logger.info("blockchain.compile.start")

        def _echo(line: str) -> None:
            if "Compiled" in line or "Successfully" in line:
                logger.info("blockchain.compile.output", line=line)

        try:
            exit_code, output = await run_streaming(
                self.config.resolved_compile_command(),
                cwd=contracts_dir,
                env=os.environ.copy(),
                timeout=self.config.compile_timeout_seconds,
                on_line=_echo,
            )
        except Exception as exc:
            logger.warning("blockchain.compile.skipped", error=str(exc))
            return

        if exit_code != 0:
            logger.warning("blockchain.compile.failed", exit_code=exit_code, msg="continuing with deployment")
            logger.debug("blockchain.compile.output", output=output)
        else:
            logger.info("blockchain.compile.complete")
