"""
Domain enums for the cookbook.
Contains all enumeration types used across the domain models.
"""

import enum


class EntryType(str, enum.Enum):
    """Kinds of entries stored in the cookbook"""

    INGREDIENT = "ingredient"
    RECIPE = "recipe"


class ResolutionErrorKind(str, enum.Enum):
    """Reasons a recipe summary could not be produced"""

    NOT_FOUND_OR_NOT_RECIPE = "not_found_or_not_recipe"
    MISSING_REQUIREMENT = "missing_requirement"
    INVALID_ENTITY_TYPE = "invalid_entity_type"
    CYCLIC_REQUIREMENT = "cyclic_requirement"
    DEPTH_EXCEEDED = "depth_exceeded"
