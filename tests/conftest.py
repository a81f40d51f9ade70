"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from mindful_tracker.config import Settings
from mindful_tracker.containers import AppContainer
from mindful_tracker.domain.goals import UserSettings
from mindful_tracker.domain.meals import FoodItem, Meal, MealContext, MealType
from mindful_tracker.services.aggregation import build_meal
from mindful_tracker.services.meal_parser import MealParserClient, MealParserService
from mindful_tracker.services.meals import MealRepository, MealService
from mindful_tracker.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


def make_item(
    calories: float = 0, protein: float = 0, fiber: float = 0, name: str = "food"
) -> FoodItem:
    return FoodItem(
        id=str(uuid4()), name=name, calories=calories, protein=protein, fiber=fiber
    )


def make_meal(  # noqa: PLR0913
    day: date,
    meal_type: MealType = MealType.LUNCH,
    calories: float = 0,
    protein: float = 0,
    fiber: float = 0,
    stress_level: int | None = None,
    hunger_level: int | None = None,
) -> Meal:
    context = None
    if stress_level is not None or hunger_level is not None:
        context = MealContext(hunger_level=hunger_level, stress_level=stress_level)
    return build_meal(
        meal_id=str(uuid4()),
        day=day,
        meal_type=meal_type,
        items=[make_item(calories, protein, fiber)],
        created_at=datetime.now(tz=UTC),
        context=context,
    )


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[str, tuple[UUID, Meal]] = field(default_factory=dict)
    raw_contexts: dict[str, dict[str, object]] = field(default_factory=dict)

    def add(self, user_id: UUID, *meals: Meal) -> None:
        for meal in meals:
            self.meals[meal.id] = (user_id, meal)

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        return [
            meal
            for owner, meal in self.meals.values()
            if owner == user_id and start <= meal.day <= end
        ]

    def list_all_meals(self, user_id: UUID) -> list[Meal]:
        meals = [meal for owner, meal in self.meals.values() if owner == user_id]
        return sorted(meals, key=lambda meal: meal.created_at, reverse=True)

    def get_meal(self, user_id: UUID, meal_id: str) -> Meal | None:
        entry = self.meals.get(meal_id)
        if entry is None or entry[0] != user_id:
            return None
        return entry[1]

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        self.meals[meal.id] = (user_id, meal)
        return meal

    def update_meal(self, user_id: UUID, meal: Meal) -> Meal | None:
        if self.get_meal(user_id, meal.id) is None:
            return None
        self.meals[meal.id] = (user_id, meal)
        return meal

    def delete_meal(self, user_id: UUID, meal_id: str) -> None:
        if self.get_meal(user_id, meal_id) is not None:
            del self.meals[meal_id]

    def list_meal_contexts(self) -> list[tuple[str, dict[str, object]]]:
        return list(self.raw_contexts.items())

    def update_meal_context(self, meal_id: str, context: dict[str, object]) -> None:
        self.raw_contexts[meal_id] = context


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    settings: dict[UUID, UserSettings] = field(default_factory=dict)

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        return self.settings.get(user_id)

    def upsert_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        self.settings[user_id] = replace(settings)
        return self.settings[user_id]


@dataclass
class FakeMealParserClient(MealParserClient):
    """Fake parser client returning a fixed completion."""

    content: str = (
        "```json\n"
        '[{"name": "oatmeal", "calories": 150.4, "protein": 5.5, "fiber": 4.2,'
        ' "quantity": "1 cup"}]\n'
        "```"
    )
    prompts: list[str] = field(default_factory=list)

    async def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.content


@dataclass
class FakeResponse:
    """Response object returned by the fake query builder."""

    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    """Chainable Supabase table query with queued responses per action."""

    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_options: dict[str, object] = field(default_factory=dict)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    ranges: list[tuple[int, int]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload, **options) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_options = options
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def range(self, start: int, end: int) -> "FakeTable":
        self.ranges.append((start, end))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    """Supabase client fake handing out one FakeTable per name."""

    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository()


@pytest.fixture
def parser_client() -> FakeMealParserClient:
    return FakeMealParserClient()


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRepository,
    settings_repository: InMemoryUserSettingsRepository,
    parser_client: FakeMealParserClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_service=MealService(meal_repository),
        meal_parser_service=MealParserService(
            client=parser_client,
            model=settings.openai_model,
            temperature=settings.openai_temperature,
        ),
        user_settings_service=UserSettingsService(settings_repository),
        close_resources=close_resources,
    )
