"""Health check endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from domain.entities.common import utcnow
from infrastructure.database.models import StorageEntryModel
from infrastructure.database.session import get_async_session

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage: str | None = None
    storage_keys: int | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without touching the storage. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Detailed health check including storage connectivity.

    Reports how many keys the storage currently holds.
    """
    storage_keys: int | None = None
    try:
        result = await db.execute(select(func.count()).select_from(StorageEntryModel))
        storage_keys = result.scalar_one()
        storage_status = "healthy"
    except SQLAlchemyError as e:
        storage_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if storage_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.app_version,
        timestamp=utcnow().isoformat(),
        environment=settings.app_env,
        storage=storage_status,
        storage_keys=storage_keys,
    )
