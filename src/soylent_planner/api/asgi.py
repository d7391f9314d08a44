"""ASGI entrypoint for the soylent planner API."""

from soylent_planner.api.app import create_app
from soylent_planner.containers import build_container

app = create_app(build_container())
