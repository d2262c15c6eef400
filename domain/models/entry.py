"""
Cookbook entry models - ingredients and recipes.
Entries are immutable once stored; the tag in ``type`` selects the variant.
"""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict

from domain.enums import EntryType


class RequiredItem(BaseModel):
    """One requirement line of a recipe: ``quantity`` units of entry ``name``."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int


class CookbookEntry(BaseModel):
    """Common shape of everything stored in the cookbook."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: EntryType


class Ingredient(CookbookEntry):
    """Base ingredient. ``cook_time`` is per single unit."""

    type: Literal[EntryType.INGREDIENT] = EntryType.INGREDIENT
    cook_time: int

    def __repr__(self):
        return f"<Ingredient(name='{self.name}', cook_time={self.cook_time})>"


class Recipe(CookbookEntry):
    """
    Composite entry made of other entries.

    Referenced names are not checked when the recipe is stored; they are
    looked up when the recipe is summarized.
    """

    type: Literal[EntryType.RECIPE] = EntryType.RECIPE
    required_items: Tuple[RequiredItem, ...] = ()

    def __repr__(self):
        return f"<Recipe(name='{self.name}', required_items={len(self.required_items)})>"
