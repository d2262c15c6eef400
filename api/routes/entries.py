"""
Entry routes - add ingredients and recipes to the cookbook.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_entry_service
from services.entry_service import EntryService

router = APIRouter(tags=["Entries"])


@router.post("/entry", status_code=status.HTTP_200_OK)
def create_entry(
    payload: Any = Body(default=None),
    service: EntryService = Depends(get_entry_service),
) -> Response:
    """
    Add an ingredient or a recipe.

    - **ingredient**: `{"type": "ingredient", "name": str, "cookTime": int >= 0}`
    - **recipe**: `{"type": "recipe", "name": str, "requiredItems": [{"name": str, "quantity": int >= 1}]}`

    Responds with an empty body on success and 400 when the entry is rejected.
    """
    service.insert(payload)
    return Response(status_code=status.HTTP_200_OK)
