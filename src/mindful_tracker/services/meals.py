"""Meal logging service."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from mindful_tracker.domain.errors import MealNotFoundError
from mindful_tracker.domain.goals import DailyGoals
from mindful_tracker.domain.meals import DayData, FoodItem, Meal, MealContext, MealType
from mindful_tracker.domain.mindfulness import MindfulnessOverview
from mindful_tracker.domain.quality import NutrientEfficiency
from mindful_tracker.domain.summary import DaySummary, ItemSummary, MealSummary
from mindful_tracker.services.aggregation import (
    aggregate_days,
    build_day,
    build_meal,
    meal_with_items,
)
from mindful_tracker.services.mindfulness import (
    REPORT_DAYS,
    WEEK_DAYS,
    build_report,
    daily_time_series,
    find_weakest_meal_type,
)
from mindful_tracker.services.quality import day_quality, nutrient_efficiency
from mindful_tracker.services.scoring import day_score


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return meals dated within ``start`` and ``end`` inclusive."""

    def list_all_meals(self, user_id: UUID) -> list[Meal]:
        """Return every meal for a user, newest first."""

    def get_meal(self, user_id: UUID, meal_id: str) -> Meal | None:
        """Return a meal by id."""

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        """Persist a new meal and return the stored row."""

    def update_meal(self, user_id: UUID, meal: Meal) -> Meal | None:
        """Replace a stored meal, or return None when it does not exist."""

    def delete_meal(self, user_id: UUID, meal_id: str) -> None:
        """Delete a meal."""

    def list_meal_contexts(self) -> list[tuple[str, dict[str, object]]]:
        """Return (meal id, raw context) for every meal with a context."""

    def update_meal_context(self, meal_id: str, context: dict[str, object]) -> None:
        """Overwrite the raw context of a meal."""


@dataclass
class MealService:
    """Service that stores meals and derives day views from them."""

    repository: MealRepository

    def log_meal(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        items: list[FoodItem],
        context: MealContext | None = None,
    ) -> Meal:
        """Compute totals for the items and persist a new meal."""
        meal = build_meal(
            meal_id=str(uuid4()),
            day=day,
            meal_type=meal_type,
            items=items,
            created_at=datetime.now(tz=UTC),
            context=context,
        )
        return self.repository.create_meal(user_id, meal)

    def update_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_id: str,
        day: date,
        meal_type: MealType,
        items: list[FoodItem],
        context: MealContext | None = None,
    ) -> Meal:
        """Replace a meal's contents and refresh its totals."""
        current = self.repository.get_meal(user_id, meal_id)
        if current is None:
            raise MealNotFoundError(meal_id)
        updated = meal_with_items(
            replace(current, day=day, type=meal_type, context=context), items
        )
        stored = self.repository.update_meal(user_id, updated)
        if stored is None:
            raise MealNotFoundError(meal_id)
        return stored

    def delete_meal(self, user_id: UUID, meal_id: str) -> None:
        """Delete a meal."""
        self.repository.delete_meal(user_id, meal_id)

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return every meal for a user."""
        return self.repository.list_all_meals(user_id)

    def get_day(self, user_id: UUID, day: date) -> DayData:
        """Return the aggregate for a single day."""
        return build_day(day, self.repository.list_meals(user_id, day, day))

    def get_days(self, user_id: UUID, num_days: int, today: date) -> list[DayData]:
        """Return ``num_days`` day aggregates ending at ``today``, newest first."""
        if num_days <= 0:
            return []
        start = today - timedelta(days=num_days - 1)
        meals = self.repository.list_meals(user_id, start, today)
        return aggregate_days(meals, num_days, today)

    def get_day_summaries(
        self, user_id: UUID, num_days: int, today: date, goals: DailyGoals
    ) -> list[DaySummary]:
        """Return day aggregates with score and quality bands."""
        return [
            summarize_day(day, goals)
            for day in self.get_days(user_id, num_days, today)
        ]

    def get_mindfulness(self, user_id: UUID, today: date) -> MindfulnessOverview:
        """Build the two-week mindfulness report ending at ``today``."""
        days = self.get_days(user_id, REPORT_DAYS, today)
        report = build_report(days)
        return MindfulnessOverview(
            report=report,
            time_series=daily_time_series(days[:WEEK_DAYS]),
            weakest=find_weakest_meal_type(report.by_meal_type),
        )


def summarize_day(day: DayData, goals: DailyGoals) -> DaySummary:
    """Score and classify a day aggregate, with badges per meal and item."""
    protein, fiber = _efficiencies(
        day.total_calories, day.total_protein, day.total_fiber, goals
    )
    return DaySummary(
        day=day,
        score=day_score(day, goals),
        protein_quality=day_quality(day, goals, "protein"),
        fiber_quality=day_quality(day, goals, "fiber"),
        protein_efficiency=protein,
        fiber_efficiency=fiber,
        meals=[summarize_meal(meal, goals) for meal in day.meals],
    )


def summarize_meal(meal: Meal, goals: DailyGoals) -> MealSummary:
    """Efficiency badges for a meal and each of its items."""
    protein, fiber = _efficiencies(
        meal.total_calories, meal.total_protein, meal.total_fiber, goals
    )
    return MealSummary(
        meal=meal,
        protein_efficiency=protein,
        fiber_efficiency=fiber,
        items=[_summarize_item(item, goals) for item in meal.items],
    )


def _summarize_item(item: FoodItem, goals: DailyGoals) -> ItemSummary:
    protein, fiber = _efficiencies(item.calories, item.protein, item.fiber, goals)
    return ItemSummary(item=item, protein_efficiency=protein, fiber_efficiency=fiber)


def _efficiencies(
    calories: float, protein: float, fiber: float, goals: DailyGoals
) -> tuple[NutrientEfficiency, NutrientEfficiency]:
    return (
        nutrient_efficiency(protein, calories, "protein", goals),
        nutrient_efficiency(fiber, calories, "fiber", goals),
    )
