"""Tests for container wiring."""

import asyncio

from mindful_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.meal_service is not None
    assert container.meal_parser_service.model == "gpt-4o-mini"
    assert container.user_settings_service.defaults.goals.calories == 2000
    asyncio.run(container.close_resources())
