"""One-time data migrations."""

import logging
from dataclasses import dataclass

from mindful_tracker.services.meals import MealRepository

CALM_SCALE_FLIP = 6

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MigrationResult:
    """Counts from a migration run."""

    updated: int
    errors: int


def flip_stress_level(context: dict[str, object]) -> dict[str, object]:
    """Convert a stored stress level (5 = stressed) to the calm scale (5 = calm)."""
    if not _has_stress_level(context):
        return context
    return {**context, "stressLevel": CALM_SCALE_FLIP - context["stressLevel"]}


def migrate_stress_to_calm(repository: MealRepository) -> MigrationResult:
    """Rewrite every stored stress level onto the calm scale.

    Run once against legacy data; reads always assume the calm scale.
    """
    pending = [
        (meal_id, context)
        for meal_id, context in repository.list_meal_contexts()
        if _has_stress_level(context)
    ]
    _logger.info("Found %s meals with stressLevel to migrate", len(pending))
    updated = 0
    errors = 0
    for meal_id, context in pending:
        flipped = flip_stress_level(context)
        try:
            repository.update_meal_context(meal_id, flipped)
        except Exception:
            _logger.exception("Failed to migrate meal %s", meal_id)
            errors += 1
            continue
        _logger.info(
            "Meal %s: stressLevel %s -> %s",
            meal_id,
            context["stressLevel"],
            flipped["stressLevel"],
        )
        updated += 1
    return MigrationResult(updated=updated, errors=errors)


def _has_stress_level(context: dict[str, object]) -> bool:
    value = context.get("stressLevel")
    return isinstance(value, int | float) and not isinstance(value, bool)
