"""Domain models for meals and day aggregates."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class MealType(StrEnum):
    """Kinds of meals a user can log."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    INDULGENCE = "indulgence"


@dataclass(frozen=True)
class FoodItem:
    """Single food entry inside a meal."""

    id: str
    name: str
    calories: float
    protein: float
    fiber: float
    quantity: str | None = None


@dataclass(frozen=True)
class MealContext:
    """Self-reported context for a meal.

    ``stress_level`` holds the calmness scale: 1 is not calm, 5 is very calm.
    ``hunger_level`` runs from 1 (starving) to 5 (full).
    """

    hunger_level: int | None = None
    stress_level: int | None = None
    ate_with_others: bool | None = None
    notes: str | None = None


@dataclass(frozen=True)
class NutrientTotals:
    """Summed calories, protein and fiber."""

    calories: float
    protein: float
    fiber: float


@dataclass(frozen=True)
class Meal:
    """A logged meal with cached totals over its items."""

    id: str
    day: date
    type: MealType
    items: list[FoodItem]
    total_calories: float
    total_protein: float
    total_fiber: float
    created_at: datetime
    context: MealContext | None = None


@dataclass(frozen=True)
class DayData:
    """Meals and totals for a single calendar day."""

    day: date
    meals: list[Meal]
    total_calories: float
    total_protein: float
    total_fiber: float
    protein_per_calorie: float
    fiber_per_calorie: float
