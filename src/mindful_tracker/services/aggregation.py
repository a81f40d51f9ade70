"""Nutrient aggregation for meals and days."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime, timedelta

from mindful_tracker.domain.meals import (
    DayData,
    FoodItem,
    Meal,
    MealContext,
    MealType,
    NutrientTotals,
)


def sum_items(items: Iterable[FoodItem]) -> NutrientTotals:
    """Sum calories, protein and fiber over food items."""
    calories = 0.0
    protein = 0.0
    fiber = 0.0
    for item in items:
        calories += item.calories
        protein += item.protein
        fiber += item.fiber
    return NutrientTotals(calories=calories, protein=protein, fiber=fiber)


def per_calorie(value: float, calories: float) -> float:
    """Return nutrient grams per calorie, or 0 when there are no calories."""
    if calories > 0:
        return value / calories
    return 0.0


def build_meal(  # noqa: PLR0913
    *,
    meal_id: str,
    day: date,
    meal_type: MealType,
    items: list[FoodItem],
    created_at: datetime,
    context: MealContext | None = None,
) -> Meal:
    """Create a meal whose totals match its items."""
    totals = sum_items(items)
    return Meal(
        id=meal_id,
        day=day,
        type=meal_type,
        items=list(items),
        total_calories=totals.calories,
        total_protein=totals.protein,
        total_fiber=totals.fiber,
        created_at=created_at,
        context=context,
    )


def meal_with_items(meal: Meal, items: list[FoodItem]) -> Meal:
    """Return a copy of the meal with new items and recomputed totals."""
    totals = sum_items(items)
    return replace(
        meal,
        items=list(items),
        total_calories=totals.calories,
        total_protein=totals.protein,
        total_fiber=totals.fiber,
    )


def build_day(day: date, meals: Iterable[Meal]) -> DayData:
    """Aggregate the meals logged on ``day``; other dates are ignored."""
    day_meals = [meal for meal in meals if meal.day == day]
    total_calories = sum(meal.total_calories for meal in day_meals)
    total_protein = sum(meal.total_protein for meal in day_meals)
    total_fiber = sum(meal.total_fiber for meal in day_meals)
    return DayData(
        day=day,
        meals=day_meals,
        total_calories=total_calories,
        total_protein=total_protein,
        total_fiber=total_fiber,
        protein_per_calorie=per_calorie(total_protein, total_calories),
        fiber_per_calorie=per_calorie(total_fiber, total_calories),
    )


def aggregate_days(meals: Iterable[Meal], num_days: int, today: date) -> list[DayData]:
    """Return one entry per day ending at ``today``, newest first.

    Days without meals are included with zero totals.
    """
    by_day: dict[date, list[Meal]] = {}
    for meal in meals:
        by_day.setdefault(meal.day, []).append(meal)

    days = []
    for offset in range(max(num_days, 0)):
        day = today - timedelta(days=offset)
        days.append(build_day(day, by_day.get(day, [])))
    return days
