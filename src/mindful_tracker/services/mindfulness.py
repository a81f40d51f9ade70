"""Mindful eating metrics, reports and time series."""

from collections.abc import Iterable, Mapping, Sequence

from mindful_tracker.domain.meals import DayData, Meal, MealType
from mindful_tracker.domain.mindfulness import (
    DailyMindfulnessPoint,
    MindfulnessMetrics,
    MindfulnessReport,
    MindfulnessTrends,
    PercentColor,
    WeakestMealType,
)
from mindful_tracker.rounding import round_half_up

CALM_THRESHOLD = 4
HUNGER_MIN = 3
HUNGER_MAX = 4
WEEK_DAYS = 7
REPORT_DAYS = WEEK_DAYS * 2
GOOD_PERCENT = 70
FAIR_PERCENT = 50

_WEAKEST_CANDIDATES = (
    MealType.BREAKFAST,
    MealType.LUNCH,
    MealType.DINNER,
    MealType.SNACK,
)
_DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def is_calm(meal: Meal) -> bool:
    """Return True when the meal was eaten calm (4-5 on the calm scale)."""
    stress_level = meal.context.stress_level if meal.context else None
    return (stress_level or 0) >= CALM_THRESHOLD


def is_hungry(meal: Meal) -> bool:
    """Return True when the meal was eaten at moderate hunger (3-4)."""
    hunger_level = meal.context.hunger_level if meal.context else None
    return HUNGER_MIN <= (hunger_level or 0) <= HUNGER_MAX


def calculate_metrics(meals: Iterable[Meal]) -> MindfulnessMetrics:
    """Count calm and hungry meals; percentages are 0 for no meals."""
    meal_list = list(meals)
    total = len(meal_list)
    calm = sum(1 for meal in meal_list if is_calm(meal))
    hungry = sum(1 for meal in meal_list if is_hungry(meal))
    return MindfulnessMetrics(
        total_meals=total,
        calm_meals=calm,
        hungry_meals=hungry,
        calm_percent=_percent(calm, total),
        hungry_percent=_percent(hungry, total),
    )


def calculate_meal_type_metrics(
    meals: Iterable[Meal],
) -> dict[MealType, MindfulnessMetrics]:
    """Return metrics for every meal type, including types with no meals."""
    meal_list = list(meals)
    return {
        meal_type: calculate_metrics(m for m in meal_list if m.type == meal_type)
        for meal_type in MealType
    }


def build_report(days: Sequence[DayData]) -> MindfulnessReport:
    """Compare the most recent week against the week before it."""
    ordered = sorted(days, key=lambda day: day.day, reverse=True)
    this_week_meals = _flatten(ordered[:WEEK_DAYS])
    last_week_meals = _flatten(ordered[WEEK_DAYS:REPORT_DAYS])

    this_week = calculate_metrics(this_week_meals)
    last_week = calculate_metrics(last_week_meals) if last_week_meals else None
    if last_week is None:
        trends = MindfulnessTrends(calm_delta=None, hungry_delta=None)
    else:
        trends = MindfulnessTrends(
            calm_delta=this_week.calm_percent - last_week.calm_percent,
            hungry_delta=this_week.hungry_percent - last_week.hungry_percent,
        )
    return MindfulnessReport(
        this_week=this_week,
        last_week=last_week,
        by_meal_type=calculate_meal_type_metrics(this_week_meals),
        trends=trends,
    )


def daily_time_series(days: Iterable[DayData]) -> list[DailyMindfulnessPoint]:
    """Return one point per day in ascending date order.

    Days without meals have ``None`` percentages rather than 0.
    """
    points = []
    for day in sorted(days, key=lambda entry: entry.day):
        metrics = calculate_metrics(day.meals)
        has_meals = metrics.total_meals > 0
        points.append(
            DailyMindfulnessPoint(
                day=day.day,
                day_label=_DAY_LABELS[day.day.weekday()],
                calm_percent=metrics.calm_percent if has_meals else None,
                hungry_percent=metrics.hungry_percent if has_meals else None,
                total_meals=metrics.total_meals,
            )
        )
    return points


def find_weakest_meal_type(
    by_meal_type: Mapping[MealType, MindfulnessMetrics],
) -> WeakestMealType | None:
    """Find the meal type and metric with the lowest percentage.

    Indulgences are not considered. Ties keep the first pair seen.
    """
    weakest: WeakestMealType | None = None
    for meal_type in _WEAKEST_CANDIDATES:
        metrics = by_meal_type.get(meal_type)
        if metrics is None or metrics.total_meals == 0:
            continue
        if weakest is None or metrics.calm_percent < weakest.percent:
            weakest = WeakestMealType(
                type=meal_type, metric="calm", percent=metrics.calm_percent
            )
        if metrics.hungry_percent < weakest.percent:
            weakest = WeakestMealType(
                type=meal_type, metric="hungry", percent=metrics.hungry_percent
            )
    return weakest


def percent_color(percent: float) -> PercentColor:
    """Colour band for a mindfulness percentage."""
    if percent >= GOOD_PERCENT:
        return "green"
    if percent >= FAIR_PERCENT:
        return "yellow"
    return "red"


def _flatten(days: Iterable[DayData]) -> list[Meal]:
    return [meal for day in days for meal in day.meals]


def _percent(count: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(count / total * 100)
