"""Asset submission service: deploys the asset's token, then persists the asset.

The two side effects never diverge: an asset row is written only after the
deployment gateway has returned a contract address, and a deployment failure
leaves no row behind. A failed save after a successful deployment strands the
token on-chain and is reported as PersistenceAfterDeploymentFailedError.
"""

from __future__ import annotations

import secrets
import uuid
from decimal import Decimal

import structlog

from mantle_luxury.models.assets import Asset
from mantle_luxury.models.enums import AssetStatus
from mantle_luxury.modules.assets.exceptions import (
    DeploymentFailedError,
    InvalidInputError,
    PersistenceAfterDeploymentFailedError,
)
from mantle_luxury.modules.assets.repository import AssetRepository
from mantle_luxury.modules.assets.schemas import AssetResponse, AssetSubmitRequest
from mantle_luxury.modules.blockchain.service import TokenDeploymentService

logger = structlog.get_logger()

MAX_SYMBOL_LENGTH = 6


def new_bytes32_hex() -> str:
    """Fresh random 32-byte value as 0x-prefixed hex (66 chars)."""
    return "0x" + secrets.token_hex(32)


def token_name(brand: str, model: str) -> str:
    return f"{brand} {model} Token"


def generate_token_symbol(brand: str, model: str | None) -> str:
    """Initials of each brand word plus the model initial, upper-cased, max 6 chars.

    e.g. ("Patek Philippe", "Nautilus") -> "PPN"
    """
    symbol = "".join(word[0] for word in brand.split())
    if model and model.strip():
        symbol += model.strip()[0]
    return symbol.upper()[:MAX_SYMBOL_LENGTH]


def to_supply_units(total_supply: Decimal | None) -> int:
    """Whole-token supply; fractional shares are truncated, None is zero."""
    if total_supply is None:
        return 0
    return int(total_supply)


def to_response(asset: Asset) -> AssetResponse:
    # Share sales are not tracked yet, so everything is still available
    remaining_supply = asset.total_supply if asset.total_supply is not None else Decimal("0")
    status = asset.status.value if isinstance(asset.status, AssetStatus) else str(asset.status)
    return AssetResponse(
        id=asset.id,
        asset_type=asset.asset_type,
        brand=asset.brand,
        model=asset.model,
        year=asset.year,
        price_per_share=asset.price_per_share,
        total_supply=asset.total_supply,
        remaining_supply=remaining_supply,
        status=status,
        token_address=asset.token_address,
        asset_id_bytes32=asset.asset_id_bytes32,
        created_at=asset.created_at,
    )


class AssetSubmissionService:
    def __init__(self, repository: AssetRepository, deployment: TokenDeploymentService) -> None:
        self.repository = repository
        self.deployment = deployment

    async def submit(self, request: AssetSubmitRequest) -> Asset:
        """Deploy the asset's token contract, then persist the asset as fundraising."""
        missing = [
            field for field in ("brand", "model")
            if not (getattr(request, field) or "").strip()
        ]
        if missing:
            logger.warning("asset.submit.invalid", missing=missing)
            raise InvalidInputError(
                f"{' and '.join(missing)} required to derive the token name and symbol",
                fields=missing,
            )

        brand = request.brand.strip()  # type: ignore[union-attr]
        model = request.model.strip()  # type: ignore[union-attr]
        asset_id_bytes32 = new_bytes32_hex()
        metadata_hash = new_bytes32_hex()  # placeholder until metadata is pinned off-chain
        name = token_name(brand, model)
        symbol = generate_token_symbol(brand, model)
        supply_units = to_supply_units(request.total_supply)

        log = logger.bind(asset_id=asset_id_bytes32, submitted_by=request.submitted_by)
        log.info("asset.submit.deploying", token_name=name, token_symbol=symbol, supply=supply_units)

        try:
            token_address = await self.deployment.deploy_token(
                asset_id_bytes32, name, symbol, supply_units, metadata_hash
            )
        except Exception as exc:
            log.error("asset.submit.deployment_failed", error=str(exc), error_type=type(exc).__name__)
            raise DeploymentFailedError(exc) from exc
        if not token_address:
            log.error("asset.submit.deployment_failed", error="empty address")
            raise DeploymentFailedError("Token deployment returned empty address")

        log.info("asset.submit.deployed", token_address=token_address)

        asset = Asset(
            id=uuid.uuid4(),
            asset_id_bytes32=asset_id_bytes32,
            token_address=token_address,
            metadata_hash=metadata_hash,
            asset_type=request.asset_type,
            brand=request.brand,
            model=request.model,
            year=request.year,
            description=request.description,
            purchase_price=request.purchase_price,
            purchase_date=request.purchase_date,
            serial_number=request.serial_number,
            total_supply=request.total_supply,
            price_per_share=request.price_per_share,
            submitted_by=request.submitted_by,
            status=AssetStatus.FUNDRAISING,
        )
        try:
            saved = await self.repository.save(asset)
        except Exception as exc:
            log.critical(
                "asset.submit.stranded_token",
                token_address=token_address,
                error=str(exc),
                record=asset.to_dict(),
                msg="token deployed but asset not saved; reconcile manually",
            )
            raise PersistenceAfterDeploymentFailedError(
                token_address, asset_id_bytes32, str(exc)
            ) from exc

        log.info("asset.submit.saved", id=str(saved.id), token_address=token_address)
        return saved

    async def list_assets(
        self,
        status: AssetStatus | None = None,
        asset_type: str | None = None,
        submitted_by: str | None = None,
    ) -> list[AssetResponse]:
        assets = await self.repository.find_all(
            status=status, asset_type=asset_type, submitted_by=submitted_by
        )
        return [to_response(a) for a in assets]

    async def get_asset(self, asset_id: uuid.UUID) -> AssetResponse | None:
        asset = await self.repository.find_by_id(asset_id)
        if not asset:
            return None
        return to_response(asset)
