"""Asset submission errors."""

from __future__ import annotations

from collections.abc import Sequence


class AssetSubmissionError(Exception):
    """Base class for failures of a single asset submission."""


class InvalidInputError(AssetSubmissionError, ValueError):
    """The request cannot be submitted as given; nothing external was attempted."""

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.fields = tuple(fields)


class DeploymentFailedError(AssetSubmissionError):
    """Token deployment failed; no asset was persisted."""

    def __init__(self, cause: BaseException | str) -> None:
        reason = str(cause) if str(cause) else type(cause).__name__
        super().__init__(f"Token deployment failed: {reason}")
        self.cause = cause if isinstance(cause, BaseException) else None


class PersistenceAfterDeploymentFailedError(AssetSubmissionError):
    """The token contract exists on-chain but the asset record could not be saved.

    Requires manual reconciliation: contract deployments cannot be revoked.
    """

    def __init__(self, token_address: str, asset_id_bytes32: str, reason: str) -> None:
        super().__init__(
            f"Token {token_address} was deployed for asset {asset_id_bytes32} "
            f"but the asset record could not be saved: {reason}"
        )
        self.token_address = token_address
        self.asset_id_bytes32 = asset_id_bytes32
