"""One-shot command that moves stored stress levels onto the calm scale.

Old rows used 1 = calm and 5 = stressed; reads now expect 5 = very calm.
Run exactly once per database: a second run flips the values back.
"""

import logging

from supabase import create_client

from mindful_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from mindful_tracker.app_logging import configure_logging
from mindful_tracker.config import Settings
from mindful_tracker.services.migrations import migrate_stress_to_calm

_logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> int:
    """Run the calm-scale migration; the exit code is 1 when any row failed."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    _logger.info("Starting stress level migration")
    result = migrate_stress_to_calm(SupabaseMealRepository(client))
    _logger.info(
        "Migration complete: updated=%s errors=%s", result.updated, result.errors
    )
    return 1 if result.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
