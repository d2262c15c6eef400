"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.summary_schemas import (
    IngredientQuantity,
    RecipeSummary,
    ParseRequest,
    ParseResponse,
)
from domain.schemas.entry_schemas import (
    RequiredItemCreate,
    IngredientCreate,
    RecipeCreate,
    EntryCreate,
    entry_create_adapter,
    ENTRY_TYPES,
)

__all__ = [
    # Summary schemas
    "IngredientQuantity",
    "RecipeSummary",
    "ParseRequest",
    "ParseResponse",
    # Entry schemas
    "RequiredItemCreate",
    "IngredientCreate",
    "RecipeCreate",
    "EntryCreate",
    "entry_create_adapter",
    "ENTRY_TYPES",
]
