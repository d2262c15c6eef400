"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.cookbook_repository import CookbookRepository

__all__ = [
    "BaseRepository",
    "CookbookRepository",
]
