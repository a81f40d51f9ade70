"""Tests for meal service."""

from datetime import date, timedelta
from uuid import UUID, uuid4

import pytest

from mindful_tracker.domain.errors import MealNotFoundError
from mindful_tracker.domain.goals import DailyGoals
from mindful_tracker.domain.meals import Meal, MealContext, MealType
from mindful_tracker.domain.quality import QualityLevel
from mindful_tracker.services.meals import MealService
from tests.conftest import InMemoryMealRepository, make_item, make_meal

TODAY = date(2026, 10, 18)


def test_log_meal_computes_totals_and_persists() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()

    meal = service.log_meal(
        user_id,
        day=TODAY,
        meal_type=MealType.BREAKFAST,
        items=[make_item(300, 20, 4), make_item(100, 5, 2)],
        context=MealContext(hunger_level=3, stress_level=5),
    )

    assert meal.total_calories == 400
    assert meal.total_protein == 25
    assert meal.total_fiber == 6
    assert repository.get_meal(user_id, meal.id) == meal


def test_update_meal_recomputes_totals() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    original = make_meal(TODAY, MealType.LUNCH, 600, 30, 8)
    repository.add(user_id, original)

    updated = service.update_meal(
        user_id,
        original.id,
        day=TODAY,
        meal_type=MealType.DINNER,
        items=[make_item(250, 30, 2)],
    )

    assert updated.type == MealType.DINNER
    assert updated.total_calories == 250
    assert updated.created_at == original.created_at
    assert repository.get_meal(user_id, original.id) == updated


def test_update_missing_meal_raises() -> None:
    service = MealService(InMemoryMealRepository())

    with pytest.raises(MealNotFoundError):
        service.update_meal(
            uuid4(), "missing", day=TODAY, meal_type=MealType.SNACK, items=[]
        )


def test_delete_meal_removes_it() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    meal = make_meal(TODAY, calories=100)
    repository.add(user_id, meal)

    service.delete_meal(user_id, meal.id)

    assert service.list_meals(user_id) == []


def test_get_days_returns_window_for_user() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    repository.add(
        user_id,
        make_meal(TODAY, calories=500),
        make_meal(TODAY - timedelta(days=1), calories=700),
        make_meal(TODAY - timedelta(days=7), calories=900),
    )
    repository.add(uuid4(), make_meal(TODAY, calories=1000))

    days = service.get_days(user_id, 7, TODAY)

    assert len(days) == 7
    assert days[0].day == TODAY
    assert days[0].total_calories == 500
    assert days[1].total_calories == 700
    assert sum(day.total_calories for day in days) == 1200


def test_get_day_returns_single_day() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    repository.add(user_id, make_meal(TODAY, calories=300, protein=30))

    day = service.get_day(user_id, TODAY)

    assert day.total_calories == 300
    assert day.protein_per_calorie == 0.1


def test_get_day_summaries_scores_each_day() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    repository.add(user_id, make_meal(TODAY, calories=2000, protein=150, fiber=30))
    goals = DailyGoals(calories=2000, protein=150, fiber=30)

    summaries = service.get_day_summaries(user_id, 2, TODAY, goals)

    assert summaries[0].score == 100
    assert summaries[0].protein_quality == QualityLevel.GREEN
    assert summaries[0].protein_efficiency.index == 100
    assert summaries[1].score == 33
    assert summaries[1].protein_quality == QualityLevel.MUTED
    assert summaries[1].fiber_efficiency.quality == QualityLevel.MUTED


def test_get_mindfulness_builds_overview() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    repository.add(
        user_id,
        make_meal(TODAY, MealType.BREAKFAST, stress_level=5, hunger_level=3),
        make_meal(TODAY, MealType.DINNER, stress_level=2, hunger_level=3),
        make_meal(TODAY - timedelta(days=9), stress_level=5, hunger_level=1),
    )

    overview = service.get_mindfulness(user_id, TODAY)

    assert overview.report.this_week.calm_percent == 50
    assert overview.report.last_week is not None
    assert overview.report.trends.calm_delta == -50
    assert len(overview.time_series) == 7
    assert overview.time_series[-1].day == TODAY
    assert overview.time_series[0].calm_percent is None
    assert overview.weakest is not None
    assert overview.weakest.type == MealType.DINNER
    assert overview.weakest.metric == "calm"


def test_day_summaries_include_meal_and_item_badges() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    meal = log_two_item_meal(service, user_id)
    goals = DailyGoals(calories=2000, protein=150, fiber=30)

    summary = service.get_day_summaries(user_id, 1, TODAY, goals)[0]

    assert [entry.meal for entry in summary.meals] == [meal]
    meal_summary = summary.meals[0]
    assert meal_summary.protein_efficiency.index == 176
    assert meal_summary.protein_efficiency.quality == QualityLevel.GREEN
    chicken, rice = meal_summary.items
    assert chicken.protein_efficiency.quality == QualityLevel.GREEN
    assert rice.protein_efficiency.index == 40
    assert rice.protein_efficiency.quality == QualityLevel.RED
    assert rice.fiber_efficiency.quality == QualityLevel.GREEN
    assert summary.protein_efficiency == meal_summary.protein_efficiency


def test_item_without_calories_has_muted_badge() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    service.log_meal(
        user_id,
        day=TODAY,
        meal_type=MealType.SNACK,
        items=[make_item(0, 0, 0, "water"), make_item(100, 10, 2)],
    )

    summary = service.get_day_summaries(user_id, 1, TODAY, DailyGoals())[0]

    water = summary.meals[0].items[0]
    assert water.protein_efficiency.quality == QualityLevel.MUTED
    assert water.fiber_efficiency.index == 0


def log_two_item_meal(service: MealService, user_id: UUID) -> Meal:
    return service.log_meal(
        user_id,
        day=TODAY,
        meal_type=MealType.DINNER,
        items=[make_item(300, 60, 0, "chicken"), make_item(200, 6, 4, "rice")],
    )
