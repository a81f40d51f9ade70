"""Domain models for user goals and settings."""

from dataclasses import dataclass, field
from typing import Literal

Nutrient = Literal["protein", "fiber"]
Sex = Literal["male", "female"]


@dataclass(frozen=True)
class DailyGoals:
    """Daily targets: a calorie ceiling and protein/fiber floors."""

    calories: float = 2000
    protein: float = 150
    fiber: float = 30


DEFAULT_GOALS = DailyGoals()


@dataclass(frozen=True)
class UserSettings:
    """Body profile and goals configured by a user."""

    age: int = 30
    sex: Sex = "male"
    height_feet: int = 5
    height_inches: int = 10
    weight: float = 180
    activity_level: float = 1.55
    goals: DailyGoals = field(default_factory=DailyGoals)
