"""User settings endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from mindful_tracker.api.dependencies import require_user
from mindful_tracker.api.schemas import SettingsSchema

if TYPE_CHECKING:
    from mindful_tracker.containers import AppContainer

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_settings(
    request: Request, user_id: UUID = Depends(require_user)
) -> SettingsSchema:
    """Return the user's settings or the defaults."""
    container: AppContainer = request.app.state.container
    settings = container.user_settings_service.get_settings(user_id)
    return SettingsSchema.from_domain(settings)


@router.put("")
async def update_settings(
    body: SettingsSchema, request: Request, user_id: UUID = Depends(require_user)
) -> SettingsSchema:
    """Save the user's settings."""
    container: AppContainer = request.app.state.container
    stored = container.user_settings_service.update_settings(
        user_id, body.to_domain()
    )
    return SettingsSchema.from_domain(stored)
