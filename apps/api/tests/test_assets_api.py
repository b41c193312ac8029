"""Tests for the asset catalog / submission endpoints and the health check."""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from mantle_luxury.modules.assets.repository import AssetRepository
from mantle_luxury.modules.blockchain.deployers.mock import mock_address
from mantle_luxury.modules.blockchain.exceptions import (
    DeploymentProcessFailedError,
    DeploymentTimedOutError,
)
from mantle_luxury.modules.blockchain.service import TokenDeploymentService

pytestmark = pytest.mark.anyio


def _failing_deployer(exc: Exception) -> MagicMock:
    deployer = MagicMock()
    deployer.mode = "live"
    deployer.deploy = AsyncMock(side_effect=exc)
    return deployer


# ── Submit ──────────────────────────────────────────────────────────────────


async def test_submit_asset_201(client: AsyncClient, submission_payload: dict) -> None:
    response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["status"] == "fundraising"
    assert data["brand"] == "Patek Philippe"
    assert data["assetType"] == "watch"
    assert Decimal(data["totalSupply"]) == Decimal("1000")
    assert Decimal(data["remainingSupply"]) == Decimal("1000")
    assert len(data["assetIdBytes32"]) == 66
    assert data["tokenAddress"] == mock_address(data["assetIdBytes32"])
    uuid.UUID(data["id"])


async def test_submit_accepts_snake_case(client: AsyncClient) -> None:
    response = await client.post(
        "/v1/assets/submit",
        json={"asset_type": "jewelry", "brand": "Van Cleef & Arpels", "model": "Alhambra"},
    )
    assert response.status_code == 201, response.text
    assert response.json()["assetType"] == "jewelry"


async def test_submit_missing_model_400(client: AsyncClient, submission_payload: dict) -> None:
    del submission_payload["model"]

    response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "invalid_input"
    assert body["detail"] == ["model"]
    assert (await client.get("/v1/assets")).json() == []


async def test_submit_missing_asset_type_422(client: AsyncClient, submission_payload: dict) -> None:
    del submission_payload["assetType"]
    response = await client.post("/v1/assets/submit", json=submission_payload)
    assert response.status_code == 422


async def test_submit_deployment_failure_502_nothing_stored(
    client: AsyncClient, submission_payload: dict, deployment: TokenDeploymentService
) -> None:
    deployment.deployer = _failing_deployer(DeploymentProcessFailedError(1, "HH100: Network mantleTestnet doesn't exist"))

    response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 502
    body = response.json()
    assert body["error"] == "deployment_failed"
    assert "exit code: 1" in body["message"]
    assert body["detail"] == "DeploymentProcessFailedError"
    assert (await client.get("/v1/assets")).json() == []


async def test_submit_deployment_timeout_504(
    client: AsyncClient, submission_payload: dict, deployment: TokenDeploymentService
) -> None:
    deployment.deployer = _failing_deployer(DeploymentTimedOutError(300.0))

    response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 504
    assert response.json()["error"] == "deployment_timed_out"
    assert (await client.get("/v1/assets")).json() == []


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("submittedBy", "collector-" + "9" * 40 + "@example.com"),
        ("brand", "B" * 101),
        ("assetType", "w" * 51),
        ("serialNumber", "S" * 201),
        ("year", 100000),
        ("totalSupply", "1" + "0" * 19),
        ("pricePerShare", "0.0000000000000000001"),
        ("purchasePrice", "-1"),
    ],
)
async def test_submit_oversized_field_422_without_deploy(
    client: AsyncClient,
    submission_payload: dict,
    deployment: TokenDeploymentService,
    field: str,
    value: object,
) -> None:
    deployer = MagicMock()
    deployer.mode = "mock"
    deployer.deploy = AsyncMock(return_value="0x" + "12" * 20)
    deployment.deployer = deployer
    submission_payload[field] = value

    response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 422
    deployer.deploy.assert_not_awaited()
    assert (await client.get("/v1/assets")).json() == []


async def test_submit_save_failure_reports_stranded_token(
    client: AsyncClient, submission_payload: dict
) -> None:
    with patch.object(
        AssetRepository, "save", AsyncMock(side_effect=SQLAlchemyError("disk full"))
    ):
        response = await client.post("/v1/assets/submit", json=submission_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "persistence_after_deployment_failed"
    detail = body["detail"]
    assert detail["tokenAddress"] == mock_address(detail["assetIdBytes32"])
    assert "disk full" in body["message"]


# ── Catalog ─────────────────────────────────────────────────────────────────


async def test_get_asset_by_id(client: AsyncClient, submission_payload: dict) -> None:
    created = (await client.post("/v1/assets/submit", json=submission_payload)).json()

    response = await client.get(f"/v1/assets/{created['id']}")

    assert response.status_code == 200
    assert response.json()["assetIdBytes32"] == created["assetIdBytes32"]


async def test_get_asset_404(client: AsyncClient) -> None:
    response = await client.get(f"/v1/assets/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["message"] == "Asset not found"


async def test_list_assets_filters(client: AsyncClient, submission_payload: dict) -> None:
    await client.post("/v1/assets/submit", json=submission_payload)
    await client.post(
        "/v1/assets/submit",
        json={**submission_payload, "assetType": "jewelry", "brand": "Cartier", "model": "Love"},
    )

    everything = (await client.get("/v1/assets")).json()
    assert len(everything) == 2

    watches = (await client.get("/v1/assets", params={"assetType": "watch"})).json()
    assert [a["brand"] for a in watches] == ["Patek Philippe"]

    fundraising = (await client.get("/v1/assets", params={"status": "fundraising"})).json()
    assert len(fundraising) == 2

    sold = (await client.get("/v1/assets", params={"status": "sold"})).json()
    assert sold == []

    mine = (
        await client.get("/v1/assets", params={"submittedBy": submission_payload["submittedBy"]})
    ).json()
    assert len(mine) == 2


async def test_list_assets_rejects_unknown_status(client: AsyncClient) -> None:
    response = await client.get("/v1/assets", params={"status": "burned"})
    assert response.status_code == 422


# ── Health ──────────────────────────────────────────────────────────────────


async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "mantle-luxury-api"
    assert data["checks"]["database"]["status"] == "healthy"
    assert data["checks"]["blockchain"]["mode"] == "mock"
    assert response.headers["X-API-Version"] == "v1"
