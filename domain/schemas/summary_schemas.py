"""Pydantic schemas for recipe summaries and name parsing."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class IngredientQuantity(BaseModel):
    """Total quantity of one base ingredient in an expanded recipe."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int


class RecipeSummary(BaseModel):
    """Flattened view of a recipe: total cook time and base ingredients."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    cook_time: int = Field(alias="cookTime")
    ingredients: List[IngredientQuantity] = []


class ParseRequest(BaseModel):
    input: str = ""


class ParseResponse(BaseModel):
    msg: str
