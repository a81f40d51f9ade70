"""Quality bands for nutrient density."""

from dataclasses import dataclass
from enum import StrEnum


class QualityLevel(StrEnum):
    """Traffic-light quality with a muted state for zero-calorie contexts."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    MUTED = "muted"


@dataclass(frozen=True)
class QualityThresholds:
    """Lower bounds of the green and yellow bands."""

    green: float
    yellow: float


@dataclass(frozen=True)
class NutrientEfficiency:
    """Efficiency index of a nutrient against calories, relative to goals."""

    index: int
    quality: QualityLevel
    nutrient_percent: float
    calorie_percent: float
