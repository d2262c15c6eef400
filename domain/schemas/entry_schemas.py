"""Pydantic schemas for cookbook entry creation.

Incoming entries form a tagged union on ``type``. Decoding one yields either a
typed ``IngredientCreate`` / ``RecipeCreate`` or a pydantic ``ValidationError``.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, field_validator
from pydantic_core import PydanticCustomError

from domain.enums import EntryType
from domain.models.entry import Ingredient, Recipe, RequiredItem


class RequiredItemCreate(BaseModel):
    """Requirement line as sent by clients."""

    name: StrictStr
    quantity: StrictInt = Field(..., ge=1)

    def to_required_item(self) -> RequiredItem:
        return RequiredItem(name=self.name, quantity=self.quantity)


class IngredientCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["ingredient"]
    name: StrictStr = Field(..., min_length=1)
    cook_time: StrictInt = Field(..., alias="cookTime", ge=0)

    def to_entry(self) -> Ingredient:
        return Ingredient(name=self.name, cook_time=self.cook_time)


class RecipeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["recipe"]
    name: StrictStr = Field(..., min_length=1)
    required_items: List[RequiredItemCreate] = Field(..., alias="requiredItems")

    @field_validator("required_items", mode="before")
    @classmethod
    def reject_duplicate_names(cls, v):
        """Each referenced entry may appear in only one requirement line."""
        if not isinstance(v, list):
            return v
        seen = set()
        for item in v:
            name = item.get("name") if isinstance(item, dict) else None
            if not isinstance(name, str):
                continue
            if name in seen:
                raise PydanticCustomError(
                    "duplicate_required_item",
                    "Required item '{name}' is listed more than once",
                    {"name": name},
                )
            seen.add(name)
        return v

    def to_entry(self) -> Recipe:
        return Recipe(
            name=self.name,
            required_items=tuple(item.to_required_item() for item in self.required_items),
        )


EntryCreate = Annotated[Union[IngredientCreate, RecipeCreate], Field(discriminator="type")]

entry_create_adapter = TypeAdapter(EntryCreate)

ENTRY_TYPES = tuple(t.value for t in EntryType)
