"""Health check endpoint."""

from fastapi import APIRouter

from jobpreview import __version__
from jobpreview.api.dependencies import CacheDep
from jobpreview.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(cache: CacheDep) -> HealthResponse:
    """Report service status and cache size."""
    return HealthResponse(
        status="ok",
        version=__version__,
        cache_entries=len(cache),
        sweep_running=cache.running,
    )
