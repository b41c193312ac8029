"""Asset catalog and submission API router."""

import uuid

import sentry_sdk
import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mantle_luxury.core.database import get_db
from mantle_luxury.models.enums import AssetStatus
from mantle_luxury.modules.assets.exceptions import (
    DeploymentFailedError,
    InvalidInputError,
    PersistenceAfterDeploymentFailedError,
)
from mantle_luxury.modules.assets.repository import AssetRepository
from mantle_luxury.modules.assets.schemas import AssetResponse, AssetSubmitRequest
from mantle_luxury.modules.assets.service import AssetSubmissionService, to_response
from mantle_luxury.modules.blockchain.exceptions import DeploymentTimedOutError
from mantle_luxury.modules.blockchain.service import (
    TokenDeploymentService,
    get_token_deployment_service,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/assets", tags=["assets"])


def get_asset_service(
    db: AsyncSession = Depends(get_db),
    deployment: TokenDeploymentService = Depends(get_token_deployment_service),
) -> AssetSubmissionService:
    return AssetSubmissionService(AssetRepository(db), deployment)


@router.get("", response_model=list[AssetResponse])
async def list_assets(
    status_filter: AssetStatus | None = Query(None, alias="status"),
    asset_type: str | None = Query(None, alias="assetType"),
    submitted_by: str | None = Query(None, alias="submittedBy"),
    service: AssetSubmissionService = Depends(get_asset_service),
) -> list[AssetResponse]:
    """List tokenized assets, newest first."""
    return await service.list_assets(
        status=status_filter, asset_type=asset_type, submitted_by=submitted_by
    )


@router.post("/submit", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def submit_asset(
    body: AssetSubmitRequest,
    service: AssetSubmissionService = Depends(get_asset_service),
) -> AssetResponse:
    """Deploy a token for a new asset and register it for fundraising."""
    try:
        asset = await service.submit(body)
    except InvalidInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_input", "message": str(exc), "detail": list(exc.fields)},
        )
    except DeploymentFailedError as exc:
        timed_out = isinstance(exc.cause, DeploymentTimedOutError)
        raise HTTPException(
            status_code=(
                status.HTTP_504_GATEWAY_TIMEOUT if timed_out else status.HTTP_502_BAD_GATEWAY
            ),
            detail={
                "error": "deployment_timed_out" if timed_out else "deployment_failed",
                "message": str(exc),
                "detail": type(exc.cause).__name__ if exc.cause else None,
            },
        )
    except PersistenceAfterDeploymentFailedError as exc:
        sentry_sdk.capture_exception(exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "persistence_after_deployment_failed",
                "message": str(exc),
                "detail": {
                    "tokenAddress": exc.token_address,
                    "assetIdBytes32": exc.asset_id_bytes32,
                },
            },
        )
    return to_response(asset)


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: uuid.UUID,
    service: AssetSubmissionService = Depends(get_asset_service),
) -> AssetResponse:
    """Get one asset by id."""
    result = await service.get_asset(asset_id)
    if not result:
        raise HTTPException(status_code=404, detail="Asset not found")
    return result
