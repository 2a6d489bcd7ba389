"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_data_paths
from api.models.responses import HealthResponse
from core.config import API_VERSION
from core.storage import DataPaths

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(paths: DataPaths = Depends(get_data_paths)):
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if the data directory is missing.
    """
    data_available = paths.data_dir.is_dir()
    timestamp = datetime.now(timezone.utc).isoformat()

    if data_available:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            data_available=True,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                data_available=False,
                timestamp=timestamp,
                error="Data directory not found",
            ).model_dump(),
        )
