"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from uuid import UUID

from supabase import create_client

from mindful_tracker.adapters.openai_meal_parser_client import OpenAIMealParserClient
from mindful_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from mindful_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from mindful_tracker.config import Settings
from mindful_tracker.domain.goals import UserSettings
from mindful_tracker.services.meal_parser import MealParserService
from mindful_tracker.services.meals import MealService
from mindful_tracker.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    meal_parser_service: MealParserService
    user_settings_service: UserSettingsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_service = MealService(SupabaseMealRepository(supabase_client))
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        defaults=UserSettings(goals=resolved_settings.default_goals()),
    )
    user_settings_service.subscribe(log_goal_change)
    parser_client = OpenAIMealParserClient.create(resolved_settings.openai_api_key)
    meal_parser_service = MealParserService(
        client=parser_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
    )

    async def close_resources() -> None:
        await parser_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_service=meal_service,
        meal_parser_service=meal_parser_service,
        user_settings_service=user_settings_service,
        close_resources=close_resources,
    )


def log_goal_change(user_id: UUID, settings: UserSettings) -> None:
    """Record updated goals in the application log."""
    goals = settings.goals
    _logger.info(
        "Goals updated for user %s: calories=%s protein=%s fiber=%s",
        user_id,
        goals.calories,
        goals.protein,
        goals.fiber,
    )
