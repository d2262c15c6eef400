"""
Domain models package - cookbook entries and resolution results.
"""

from domain.models.entry import CookbookEntry, Ingredient, Recipe, RequiredItem
from domain.models.resolution import Resolution, ResolutionFailure

__all__ = [
    # Entries
    "CookbookEntry",
    "Ingredient",
    "Recipe",
    "RequiredItem",
    # Resolution
    "Resolution",
    "ResolutionFailure",
]
