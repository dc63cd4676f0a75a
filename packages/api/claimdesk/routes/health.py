# This project was developed with assistance from AI tools.
"""Health check route."""

from fastapi import APIRouter

from .. import __version__
from ..core.config import settings
from ..schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=list[HealthResponse])
async def health_check() -> list[HealthResponse]:
    """Report API liveness. The validator has no external dependencies to probe."""
    return [
        HealthResponse(
            name="API",
            status="healthy",
            message=f"{settings.APP_NAME} is running",
            version=__version__,
        ),
    ]
