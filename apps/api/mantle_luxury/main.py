from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

import mantle_luxury.models  # noqa: F401  (registers all models)
from mantle_luxury.core.config import settings
from mantle_luxury.core.database import get_db
from mantle_luxury.core.errors import global_exception_handler, http_exception_handler
from mantle_luxury.core.sentry import init_sentry
from mantle_luxury.modules.assets.router import router as assets_router
from mantle_luxury.modules.blockchain.service import (
    TokenDeploymentService,
    get_token_deployment_service,
)

# ── Sentry: must be initialised BEFORE FastAPI app is created ────────────────
init_sentry(settings.SENTRY_DSN, settings.SENTRY_ENVIRONMENT, settings.APP_VERSION)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    logger.info(
        "Starting Mantle Luxury API",
        env=settings.APP_ENV,
        blockchain_enabled=settings.BLOCKCHAIN_ENABLED,
    )
    # Build the deployment gateway once so a bad blockchain config fails at startup
    get_token_deployment_service()
    yield
    logger.info("Shutting down Mantle Luxury API")


_is_prod = settings.APP_ENV == "production"

app = FastAPI(
    title="Mantle Luxury API",
    description="Fractional ownership of luxury assets, tokenized on Mantle.",
    version="0.1.0",
    docs_url=None if _is_prod else "/docs",
    redoc_url=None if _is_prod else "/redoc",
    openapi_url=None if _is_prod else "/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept", "X-Request-ID"],
)

app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, global_exception_handler)


@app.middleware("http")
async def add_version_header(request: Request, call_next) -> Response:
    response = await call_next(request)
    response.headers["X-API-Version"] = "v1"
    return response


# ── Health check (root-level, not under /v1) ─────────────────────────────────


@app.get("/health")
async def health_check(
    db: AsyncSession = Depends(get_db),
    deployment: TokenDeploymentService = Depends(get_token_deployment_service),
) -> dict:
    """Probes the database and reports the blockchain deployment mode."""
    checks: dict[str, dict] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = {"status": "healthy"}
    except Exception as exc:
        checks["database"] = {"status": "unhealthy", "error": str(exc)}

    checks["blockchain"] = {"status": "healthy", "mode": deployment.mode}

    overall = (
        "healthy"
        if all(c["status"] == "healthy" for c in checks.values())
        else "degraded"
    )
    return {"status": overall, "service": "mantle-luxury-api", "checks": checks}


# ── /v1 versioned router ──────────────────────────────────────────────────────

api_v1 = APIRouter(prefix="/v1")
api_v1.include_router(assets_router)

app.include_router(api_v1)
