"""User settings service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from mindful_tracker.domain.goals import DailyGoals, UserSettings

SettingsListener = Callable[[UUID, UserSettings], None]

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the user's settings if stored."""

    def upsert_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Create or replace the user's settings."""


@dataclass
class UserSettingsService:
    """Service for user settings with change notifications."""

    repository: UserSettingsRepository
    defaults: UserSettings = field(default_factory=UserSettings)
    _listeners: list[SettingsListener] = field(default_factory=list, repr=False)

    def get_settings(self, user_id: UUID) -> UserSettings:
        """Return the user's settings or the defaults if unset."""
        return self.repository.get_settings(user_id) or self.defaults

    def get_goals(self, user_id: UUID) -> DailyGoals:
        """Return the user's daily goals."""
        return self.get_settings(user_id).goals

    def update_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Persist settings and notify subscribers."""
        stored = self.repository.upsert_settings(user_id, settings)
        for listener in list(self._listeners):
            try:
                listener(user_id, stored)
            except Exception:
                _logger.exception("Settings listener failed for user %s", user_id)
        return stored

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """Register a listener for settings changes and return an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
