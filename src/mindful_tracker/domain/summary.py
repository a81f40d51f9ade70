"""Per-day summary view."""

from dataclasses import dataclass

from mindful_tracker.domain.meals import DayData, FoodItem, Meal
from mindful_tracker.domain.quality import NutrientEfficiency, QualityLevel


@dataclass(frozen=True)
class ItemSummary:
    """Food item with its protein and fiber badges."""

    item: FoodItem
    protein_efficiency: NutrientEfficiency
    fiber_efficiency: NutrientEfficiency


@dataclass(frozen=True)
class MealSummary:
    """Meal with its own badges and one per item."""

    meal: Meal
    protein_efficiency: NutrientEfficiency
    fiber_efficiency: NutrientEfficiency
    items: list[ItemSummary]


@dataclass(frozen=True)
class DaySummary:
    """Day aggregate with score and quality bands."""

    day: DayData
    score: int
    protein_quality: QualityLevel
    fiber_quality: QualityLevel
    protein_efficiency: NutrientEfficiency
    fiber_efficiency: NutrientEfficiency
    meals: list[MealSummary]
