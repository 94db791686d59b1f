"""Health check endpoint."""

from fastapi import APIRouter

from app.config import get_settings
from app.models.schemas import HealthResponse

router = APIRouter(tags=["health"])
settings = get_settings()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    The service keeps no database or cache, so being able to answer
    means it is healthy.
    """
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        version=settings.api_version,
    )
