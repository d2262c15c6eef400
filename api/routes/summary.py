"""
Summary routes - flatten a recipe into cook time and base ingredients.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_summary_service
from app.exceptions import ServiceValidationError
from domain.schemas.summary_schemas import RecipeSummary
from services.summary_service import SummaryService

router = APIRouter(tags=["Summary"])


@router.get("/summary", response_model=RecipeSummary)
def get_summary(
    name: Optional[str] = Query(default=None, description="Recipe name"),
    service: SummaryService = Depends(get_summary_service),
) -> RecipeSummary:
    """
    Summarize a recipe.

    Every nested recipe is expanded; ingredient quantities reached through
    several paths are added together. Any unknown name, an ingredient name or
    a missing requirement gives a 400 with no partial summary.
    """
    if not name:
        raise ServiceValidationError("Query parameter 'name' is required", code="INVALID_NAME")
    return service.get_summary(name)
