"""Day scoring against daily goals."""

from dataclasses import dataclass

from mindful_tracker.domain.goals import DEFAULT_GOALS, DailyGoals
from mindful_tracker.domain.meals import DayData
from mindful_tracker.rounding import round_half_up

WEIGHT = 100 / 3
CALORIE_OVERAGE_LIMIT = 0.2
MAX_SCORE = 100


@dataclass(frozen=True)
class ScoreComponents:
    """Unrounded contribution of each dimension to the day score."""

    calories: float
    protein: float
    fiber: float

    @property
    def total(self) -> float:
        """Sum of the three components."""
        return self.calories + self.protein + self.fiber


def score_components(
    day: DayData, goals: DailyGoals = DEFAULT_GOALS
) -> ScoreComponents:
    """Compute the calorie, protein and fiber components of a day score."""
    return ScoreComponents(
        calories=_calorie_component(day.total_calories, goals.calories),
        protein=_floor_component(day.total_protein, goals.protein),
        fiber=_floor_component(day.total_fiber, goals.fiber),
    )


def day_score(day: DayData, goals: DailyGoals = DEFAULT_GOALS) -> int:
    """Return the 0-100 score for a day.

    Staying at or under the calorie goal earns a full third; going over decays
    linearly to nothing at 20% over. Protein and fiber each earn up to a third
    in proportion to their goals, without bonus for exceeding them. A goal of
    zero counts as met.
    """
    total = round_half_up(score_components(day, goals).total)
    return min(max(total, 0), MAX_SCORE)


def _calorie_component(total: float, goal: float) -> float:
    if goal <= 0 or total <= goal:
        return WEIGHT
    over_by = total - goal
    penalty = min(over_by / (goal * CALORIE_OVERAGE_LIMIT), 1)
    return WEIGHT * (1 - penalty)


def _floor_component(total: float, goal: float) -> float:
    if goal <= 0:
        return WEIGHT
    return WEIGHT * min(max(total, 0) / goal, 1)
