"""Domain models for mindful eating reports."""

from dataclasses import dataclass
from datetime import date
from typing import Literal

from mindful_tracker.domain.meals import MealType

MindfulnessMetric = Literal["calm", "hungry"]
PercentColor = Literal["green", "yellow", "red"]


@dataclass(frozen=True)
class MindfulnessMetrics:
    """Counts and whole-number percentages of calm and hungry meals."""

    total_meals: int
    calm_meals: int
    hungry_meals: int
    calm_percent: int
    hungry_percent: int


@dataclass(frozen=True)
class MindfulnessTrends:
    """Percentage-point change against the previous week."""

    calm_delta: int | None
    hungry_delta: int | None


@dataclass(frozen=True)
class MindfulnessReport:
    """Two-week comparison of mindful eating."""

    this_week: MindfulnessMetrics
    last_week: MindfulnessMetrics | None
    by_meal_type: dict[MealType, MindfulnessMetrics]
    trends: MindfulnessTrends


@dataclass(frozen=True)
class DailyMindfulnessPoint:
    """One day in the mindfulness time series."""

    day: date
    day_label: str
    calm_percent: int | None
    hungry_percent: int | None
    total_meals: int


@dataclass(frozen=True)
class WeakestMealType:
    """Meal type and metric with the lowest percentage."""

    type: MealType
    metric: MindfulnessMetric
    percent: int


@dataclass(frozen=True)
class MindfulnessOverview:
    """Report, recent time series and weakest spot bundled for display."""

    report: MindfulnessReport
    time_series: list[DailyMindfulnessPoint]
    weakest: WeakestMealType | None
