"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    CookbookError,
    ServiceValidationError,
    NotFoundError,
    RecipeNotFoundError,
    ResolutionError,
    MissingRequirementError,
    InvalidEntityTypeError,
    CyclicRequirementError,
    ExpansionDepthError,
)

__all__ = [
    "settings",
    "CookbookError",
    "ServiceValidationError",
    "NotFoundError",
    "RecipeNotFoundError",
    "ResolutionError",
    "MissingRequirementError",
    "InvalidEntityTypeError",
    "CyclicRequirementError",
    "ExpansionDepthError",
]
