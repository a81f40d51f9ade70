"""Quality classification of nutrient density against goals.

Two formulations are supported. Daily summary cards classify the raw
nutrient-per-calorie ratio against thresholds derived from the goal ratio.
Meal and item badges show an efficiency index, the nutrient's percent of
goal divided by the calories' percent of goal, scaled to 100, banded at
100 and 67. Since

    index = (value / nutrient_goal) / (calories / calorie_goal) * 100
          = (value / calories) / goal_ratio * 100

the unrounded index is >= 100 exactly when the ratio is >= goal_ratio, and
>= 67 exactly when the ratio is >= 0.67 * goal_ratio. Bands are therefore
evaluated in ratio form for both formulations; the rounded index is for
display only and is never classified.
"""

from mindful_tracker.domain.goals import DEFAULT_GOALS, DailyGoals, Nutrient
from mindful_tracker.domain.meals import DayData
from mindful_tracker.domain.quality import (
    NutrientEfficiency,
    QualityLevel,
    QualityThresholds,
)
from mindful_tracker.rounding import round_half_up
from mindful_tracker.services.aggregation import per_calorie

EFFICIENCY_GREEN = 100
EFFICIENCY_YELLOW = 67
YELLOW_FACTOR = EFFICIENCY_YELLOW / EFFICIENCY_GREEN


def goal_ratio(goals: DailyGoals, nutrient: Nutrient) -> float:
    """Return the nutrient goal divided by the calorie goal."""
    if goals.calories <= 0:
        return 0.0
    return _nutrient_goal(goals, nutrient) / goals.calories


def thresholds_for(goals: DailyGoals, nutrient: Nutrient) -> QualityThresholds:
    """Derive green/yellow ratio thresholds from the goals."""
    green = goal_ratio(goals, nutrient)
    return QualityThresholds(green=green, yellow=green * YELLOW_FACTOR)


def classify_ratio(ratio: float, thresholds: QualityThresholds) -> QualityLevel:
    """Map a ratio to green, yellow or red."""
    if ratio >= thresholds.green:
        return QualityLevel.GREEN
    if ratio >= thresholds.yellow:
        return QualityLevel.YELLOW
    return QualityLevel.RED


def protein_quality(
    protein_per_calorie: float, goals: DailyGoals = DEFAULT_GOALS
) -> QualityLevel:
    """Classify a protein-per-calorie ratio."""
    return classify_ratio(protein_per_calorie, thresholds_for(goals, "protein"))


def fiber_quality(
    fiber_per_calorie: float, goals: DailyGoals = DEFAULT_GOALS
) -> QualityLevel:
    """Classify a fiber-per-calorie ratio."""
    return classify_ratio(fiber_per_calorie, thresholds_for(goals, "fiber"))


def day_quality(
    day: DayData, goals: DailyGoals, nutrient: Nutrient = "protein"
) -> QualityLevel:
    """Classify a day's per-calorie ratio, muted when nothing was eaten."""
    if day.total_calories <= 0:
        return QualityLevel.MUTED
    if nutrient == "protein":
        return protein_quality(day.protein_per_calorie, goals)
    return fiber_quality(day.fiber_per_calorie, goals)


def efficiency_index(
    value: float, calories: float, nutrient_goal: float, calorie_goal: float
) -> int:
    """Return the rounded efficiency index for display.

    The index is 0 when there are no calories and 100 when either goal is
    zero, since any amount meets a zero goal.
    """
    if calories <= 0:
        return 0
    if nutrient_goal <= 0 or calorie_goal <= 0:
        return EFFICIENCY_GREEN
    nutrient_percent = _percent_of_goal(value, nutrient_goal)
    calorie_percent = _percent_of_goal(calories, calorie_goal)
    return round_half_up(nutrient_percent / calorie_percent * 100)


def efficiency_quality(
    value: float, calories: float, nutrient: Nutrient, goals: DailyGoals
) -> QualityLevel:
    """Band of the unrounded efficiency index, muted without calories."""
    if calories <= 0:
        return QualityLevel.MUTED
    return classify_ratio(
        per_calorie(value, calories), thresholds_for(goals, nutrient)
    )


def nutrient_efficiency(
    value: float, calories: float, nutrient: Nutrient, goals: DailyGoals
) -> NutrientEfficiency:
    """Efficiency of a day, meal or item for one nutrient."""
    nutrient_goal = _nutrient_goal(goals, nutrient)
    return NutrientEfficiency(
        index=efficiency_index(value, calories, nutrient_goal, goals.calories),
        quality=efficiency_quality(value, calories, nutrient, goals),
        nutrient_percent=_percent_of_goal(value, nutrient_goal),
        calorie_percent=_percent_of_goal(calories, goals.calories),
    )


def _percent_of_goal(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return value / goal * 100


def _nutrient_goal(goals: DailyGoals, nutrient: Nutrient) -> float:
    if nutrient == "protein":
        return goals.protein
    return goals.fiber
