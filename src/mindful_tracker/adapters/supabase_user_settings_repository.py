"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import get_args
from uuid import UUID

from supabase import Client

from mindful_tracker.domain.goals import DailyGoals, Sex, UserSettings
from mindful_tracker.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("settings")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Create or replace the user's settings row."""
        response = (
            self.client.table("settings")
            .upsert(
                {
                    "user_id": str(user_id),
                    "age": settings.age,
                    "sex": settings.sex,
                    "height_feet": settings.height_feet,
                    "height_inches": settings.height_inches,
                    "weight": settings.weight,
                    "activity_level": settings.activity_level,
                    "calorie_goal": settings.goals.calories,
                    "protein_goal": settings.goals.protein,
                    "fiber_goal": settings.goals.fiber,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save settings")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserSettings:
    defaults = UserSettings()
    return UserSettings(
        age=int(row.get("age") or defaults.age),
        sex=_sex(row.get("sex"), defaults.sex),
        height_feet=int(row.get("height_feet") or defaults.height_feet),
        height_inches=int(row.get("height_inches") or 0),
        weight=float(row.get("weight") or defaults.weight),
        activity_level=float(row.get("activity_level") or defaults.activity_level),
        goals=DailyGoals(
            calories=_goal(row.get("calorie_goal"), defaults.goals.calories),
            protein=_goal(row.get("protein_goal"), defaults.goals.protein),
            fiber=_goal(row.get("fiber_goal"), defaults.goals.fiber),
        ),
    )


def _goal(value: object, default: float) -> float:
    if isinstance(value, int | float):
        return float(value)
    return default


def _sex(value: object, default: Sex) -> Sex:
    for sex in get_args(Sex):
        if value == sex:
            return sex
    return default
