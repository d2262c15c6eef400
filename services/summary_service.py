"""
Summary service - resolves a recipe into total cook time and base ingredients.

Expansion walks the requirement graph depth-first. Every requirement line
multiplies its quantity by the number of units of the enclosing recipe being
made, and all base-ingredient contributions are summed into one mapping no
matter which path reached them.
"""

import logging
from typing import Dict, List, Optional, Union

from app.config import settings
from app.exceptions import (
    CyclicRequirementError,
    ExpansionDepthError,
    InvalidEntityTypeError,
    MissingRequirementError,
    RecipeNotFoundError,
    ResolutionError,
)
from domain.enums import EntryType, ResolutionErrorKind
from domain.models.entry import Recipe
from domain.models.resolution import Resolution, ResolutionFailure
from domain.schemas.summary_schemas import IngredientQuantity, RecipeSummary
from repositories.cookbook_repository import CookbookRepository

logger = logging.getLogger("cookbook.summary")

_ERRORS = {
    ResolutionErrorKind.NOT_FOUND_OR_NOT_RECIPE: RecipeNotFoundError,
    ResolutionErrorKind.MISSING_REQUIREMENT: MissingRequirementError,
    ResolutionErrorKind.INVALID_ENTITY_TYPE: InvalidEntityTypeError,
    ResolutionErrorKind.CYCLIC_REQUIREMENT: CyclicRequirementError,
    ResolutionErrorKind.DEPTH_EXCEEDED: ExpansionDepthError,
}


class SummaryService:
    """Read-only resolver over a cookbook repository."""

    def __init__(self, repository: CookbookRepository, max_depth: Optional[int] = None):
        self.repository = repository
        self.max_depth = settings.max_expansion_depth if max_depth is None else max_depth

    def summarize(self, recipe_name: str) -> Resolution:
        """
        Expand a recipe into its summary.

        Args:
            recipe_name: Exact name of a stored recipe

        Returns:
            Resolution holding either the summary or the first failure met.
            A failure discards everything aggregated so far.
        """
        entry = self.repository.get_by_name(recipe_name)
        if entry is None or entry.type != EntryType.RECIPE:
            return Resolution.failed(
                ResolutionFailure(
                    ResolutionErrorKind.NOT_FOUND_OR_NOT_RECIPE,
                    recipe_name,
                    f"No recipe named '{recipe_name}'",
                )
            )

        aggregation: Dict[str, int] = {}
        try:
            expanded = self._expand(entry, 1, aggregation, [])
        except RecursionError:
            # max_depth set above what the interpreter stack allows
            expanded = ResolutionFailure(
                ResolutionErrorKind.DEPTH_EXCEEDED,
                recipe_name,
                f"Recipe '{recipe_name}' is nested too deeply to expand",
            )
        if isinstance(expanded, ResolutionFailure):
            return Resolution.failed(expanded)

        summary = RecipeSummary(
            name=recipe_name,
            cook_time=expanded,
            ingredients=[
                IngredientQuantity(name=name, quantity=quantity)
                for name, quantity in aggregation.items()
            ],
        )
        return Resolution.succeeded(summary)

    def get_summary(self, recipe_name: str) -> RecipeSummary:
        """
        Summarize a recipe for API callers.

        Raises:
            RecipeNotFoundError: If the name is unknown or names an ingredient
            ResolutionError: If the requirement graph cannot be expanded
        """
        resolution = self.summarize(recipe_name)
        if not resolution.ok:
            failure = resolution.failure
            logger.warning(
                f"Summary of '{recipe_name}' failed ({failure.kind.value}): {failure.message}"
            )
            raise _ERRORS.get(failure.kind, ResolutionError)(
                failure.message, details={"name": failure.name}
            )

        summary = resolution.summary
        logger.info(
            f"Summarized '{recipe_name}': cook_time={summary.cook_time}, "
            f"{len(summary.ingredients)} base ingredients"
        )
        return summary

    def _expand(
        self,
        recipe: Recipe,
        multiplier: int,
        aggregation: Dict[str, int],
        path: List[str],
    ) -> Union[int, ResolutionFailure]:
        """
        Add ``multiplier`` units of ``recipe`` to ``aggregation``.

        ``path`` holds the recipes currently being expanded above this one.
        Returns the cook time contributed, or the failure that stopped expansion.
        """
        if recipe.name in path:
            cycle = " -> ".join(path[path.index(recipe.name):] + [recipe.name])
            return ResolutionFailure(
                ResolutionErrorKind.CYCLIC_REQUIREMENT,
                recipe.name,
                f"Recipe '{recipe.name}' requires itself: {cycle}",
            )
        if len(path) >= self.max_depth:
            return ResolutionFailure(
                ResolutionErrorKind.DEPTH_EXCEEDED,
                recipe.name,
                f"Recipe nesting deeper than {self.max_depth} levels at '{recipe.name}'",
            )

        path.append(recipe.name)
        total_cook_time = 0

        for line in recipe.required_items:
            needed = line.quantity * multiplier
            referenced = self.repository.get_by_name(line.name)

            if referenced is None:
                return ResolutionFailure(
                    ResolutionErrorKind.MISSING_REQUIREMENT,
                    line.name,
                    f"Recipe '{recipe.name}' requires missing item '{line.name}'",
                )

            if referenced.type == EntryType.INGREDIENT:
                total_cook_time += referenced.cook_time * needed
                aggregation[referenced.name] = aggregation.get(referenced.name, 0) + needed
            elif referenced.type == EntryType.RECIPE:
                sub = self._expand(referenced, needed, aggregation, path)
                if isinstance(sub, ResolutionFailure):
                    return sub
                total_cook_time += sub
            else:
                return ResolutionFailure(
                    ResolutionErrorKind.INVALID_ENTITY_TYPE,
                    referenced.name,
                    f"Entry '{referenced.name}' has unknown type '{referenced.type}'",
                )

        path.pop()
        return total_cook_time
