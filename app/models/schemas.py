"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional

from app.models.recipe import NormalizedRecipe
from app.services.normalizers import format_duration


# ============================================================
# Recipe Schemas
# ============================================================

class RecipeResponse(BaseModel):
    """
    Extracted recipe as returned to the browser.

    `totalTime` stays an ISO 8601 duration; `totalTimeDisplay` is the
    human readable form ("1h 30m") when one can be derived.
    """
    title: str = ""
    image: Optional[str] = None
    servingsYield: Optional[str] = Field(default=None, alias="yield")
    totalTime: Optional[str] = None
    totalTimeDisplay: Optional[str] = None
    ingredients: list[str] = []
    instructions: list[str] = []
    source: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_recipe(cls, recipe: NormalizedRecipe) -> "RecipeResponse":
        return cls(
            title=recipe.title,
            image=recipe.image,
            servingsYield=recipe.servings_yield,
            totalTime=recipe.total_time,
            totalTimeDisplay=format_duration(recipe.total_time),
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            source=recipe.source or "",
        )


# ============================================================
# Utility Schemas
# ============================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    environment: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
