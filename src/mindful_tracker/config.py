"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from mindful_tracker.domain.goals import DailyGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.3
    default_calorie_goal: float = 2000
    default_protein_goal: float = 150
    default_fiber_goal: float = 30
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_goals(self) -> DailyGoals:
        """Goals used for users without stored settings."""
        return DailyGoals(
            calories=self.default_calorie_goal,
            protein=self.default_protein_goal,
            fiber=self.default_fiber_goal,
        )
