"""Shared test fixtures for the Mantle Luxury API test suite."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

import mantle_luxury.models  # noqa: F401
from mantle_luxury.core.database import Base, get_db
from mantle_luxury.main import app
from mantle_luxury.modules.blockchain.config import BlockchainConfig
from mantle_luxury.modules.blockchain.deployers.mock import MockDeployer
from mantle_luxury.modules.blockchain.service import (
    TokenDeploymentService,
    get_token_deployment_service,
)

SAMPLE_SUBMITTER = "0x1111111111111111111111111111111111111111"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def deployment() -> TokenDeploymentService:
    """Mock-mode gateway; tests swap ``deployment.deployer`` to simulate failures."""
    return TokenDeploymentService(BlockchainConfig(enabled=False), MockDeployer())


@pytest.fixture
async def client(
    engine: AsyncEngine, deployment: TokenDeploymentService
) -> AsyncGenerator[AsyncClient]:
    async def _get_test_db() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_token_deployment_service] = lambda: deployment
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def submission_payload() -> dict:
    return {
        "assetType": "watch",
        "brand": "Patek Philippe",
        "model": "Nautilus",
        "year": 2021,
        "description": "5711/1A, full set",
        "purchasePrice": "120000",
        "purchaseDate": "2021-06-01",
        "serialNumber": "PP-5711-0001",
        "totalSupply": "1000",
        "pricePerShare": "120",
        "submittedBy": SAMPLE_SUBMITTER,
    }
