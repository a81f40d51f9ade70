"""Free-text meal parsing using LLMs."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from pydantic import ValidationError

from mindful_tracker.domain.errors import MealParseError
from mindful_tracker.domain.meals import FoodItem
from mindful_tracker.domain.parsing import ParsedFoodItem, ParsedFoodItems
from mindful_tracker.rounding import round_half_up

PARSE_MEAL_PROMPT = """You are a nutrition expert. Parse the following food description into individual items.
For each item, estimate: calories, protein (grams), and fiber (grams).
Be conservative with portions if not specified (assume standard serving sizes).
Return ONLY a valid JSON array with this exact format, no other text:
[
  {
    "name": "food name",
    "calories": number,
    "protein": number,
    "fiber": number,
    "quantity": "optional portion size"
  }
]

User input: """

_CODE_FENCE = re.compile(r"```json\n?|\n?```")

_logger = logging.getLogger(__name__)


class MealParserClient(Protocol):
    """Interface for LLM text completion."""

    async def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        """Return the raw completion text for a prompt."""


@dataclass
class MealParserService:
    """Service that turns meal descriptions into food items."""

    client: MealParserClient
    model: str
    temperature: float

    async def parse(self, text: str) -> list[FoodItem]:
        """Estimate food items for a description via the configured client."""
        if not text or not text.strip():
            raise ValueError("Meal description is empty")
        content = await self.client.complete(
            model=self.model,
            temperature=self.temperature,
            prompt=PARSE_MEAL_PROMPT + text,
        )
        payload = _CODE_FENCE.sub("", content or "[]").strip()
        try:
            parsed = ParsedFoodItems.validate_json(payload)
        except ValidationError as exc:
            _logger.error("Failed to parse meal response: %s", content)
            raise MealParseError("Failed to parse AI response") from exc
        return [_to_food_item(item) for item in parsed]


def _to_food_item(item: ParsedFoodItem) -> FoodItem:
    """Assign an id and round estimates to whole numbers."""
    return FoodItem(
        id=str(uuid4()),
        name=item.name or "Unknown food",
        calories=_whole(item.calories),
        protein=_whole(item.protein),
        fiber=_whole(item.fiber),
        quantity=item.quantity,
    )


def _whole(value: float | None) -> int:
    return round_half_up(max(value or 0.0, 0.0))
