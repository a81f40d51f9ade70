"""ASGI entrypoint for the mindful tracker API."""

from mindful_tracker.api.app import create_app
from mindful_tracker.containers import build_container

app = create_app(build_container())
