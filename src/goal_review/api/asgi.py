"""ASGI entrypoint for the goal review API."""

from goal_review.api.app import create_app
from goal_review.containers import build_container

app = create_app(build_container())
