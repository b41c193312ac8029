"""Errors raised while deploying a token contract."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from mantle_luxury.modules.blockchain.schemas import DeploymentStage


class DeploymentError(Exception):
    """Base class; ``stage`` is the last stage the attempt reached."""

    def __init__(self, message: str, stage: DeploymentStage = DeploymentStage.IDLE) -> None:
        super().__init__(message)
        self.stage = stage


class RpcUnreachableError(DeploymentError):
    def __init__(self, rpc_url: str, reason: str) -> None:
        super().__init__(f"RPC connection to {rpc_url} failed: {reason}")
        self.rpc_url = rpc_url


class InsufficientFundsError(DeploymentError):
    def __init__(self, balance: Decimal, required: Decimal, faucet_url: str = "") -> None:
        message = (
            f"Insufficient balance for deployment. Need at least {required} MNT, have {balance} MNT."
        )
        if faucet_url:
            message += f" Get testnet MNT from {faucet_url}"
        super().__init__(message, DeploymentStage.CONNECTIVITY_CHECKED)
        self.balance = balance
        self.required = required


class ContractsProjectNotFoundError(DeploymentError):
    def __init__(self, candidates: Sequence[str]) -> None:
        expected = " or ".join(f"{c}/" for c in candidates)
        super().__init__(
            f"Contracts directory not found. Expected: {expected}",
            DeploymentStage.BALANCE_CHECKED,
        )
        self.candidates = tuple(candidates)


class DeploymentProcessFailedError(DeploymentError):
    def __init__(self, exit_code: int | None, output: str) -> None:
        if exit_code is None:
            message = f"Deployment process could not be started: {output}"
        else:
            message = f"Deployment process failed with exit code: {exit_code}"
        super().__init__(message, DeploymentStage.PROCESS_FAILED)
        self.exit_code = exit_code
        self.output = output


class AddressNotFoundError(DeploymentError):
    def __init__(self, output: str) -> None:
        super().__init__(
            "Failed to extract contract address from deployment output",
            DeploymentStage.ADDRESS_NOT_FOUND,
        )
        self.output = output


class DeploymentTimedOutError(DeploymentError):
    def __init__(self, timeout_seconds: float, output: str = "") -> None:
        super().__init__(
            f"Deployment process did not finish within {timeout_seconds:g}s",
            DeploymentStage.PROCESS_LAUNCHED,
        )
        self.timeout_seconds = timeout_seconds
        self.output = output
