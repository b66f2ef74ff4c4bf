"""Health probes: /health/ answers while the process runs, /health/ready only
while the process-wide database manager can run SELECT 1."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

import catalog.infrastructure.database as database
from catalog.schemas.common import LivenessResponse, ReadinessResponse

router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "catalog-api"
SERVICE_VERSION = "1.0.0"


async def _database_status() -> str:
    manager = database.db_manager
    if manager is None:
        return "not_initialized"
    return "healthy" if await manager.health_check() else "unreachable"


@router.get("/", response_model=LivenessResponse)
async def liveness():
    return LivenessResponse(service=SERVICE_NAME, version=SERVICE_VERSION)


@router.get(
    "/ready", response_model=ReadinessResponse, response_model_exclude_none=True,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness():
    db_status = await _database_status()
    if db_status != "healthy":
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(
                status="not_ready",
                checks={"database": db_status},
                error="Database unavailable",
            ).model_dump(),
        )
    return ReadinessResponse(status="ready", checks={"database": db_status})
