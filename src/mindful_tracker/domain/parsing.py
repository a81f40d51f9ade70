"""Models for AI meal parsing results."""

from pydantic import BaseModel, TypeAdapter


class ParsedFoodItem(BaseModel):
    """Single food item estimated from a free-text description."""

    name: str | None = None
    calories: float | None = None
    protein: float | None = None
    fiber: float | None = None
    quantity: str | None = None


ParsedFoodItems = TypeAdapter(list[ParsedFoodItem])
