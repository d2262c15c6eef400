"""Health check routes"""

from fastapi import APIRouter, Depends

from api.dependencies import get_repository
from api.responses import HealthResponse
from app.config import settings
from repositories.cookbook_repository import CookbookRepository

router = APIRouter(tags=["Health"])


@router.get("/health-check", response_model=HealthResponse)
def health_check(repository: CookbookRepository = Depends(get_repository)):
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        entries=len(repository),
    )
