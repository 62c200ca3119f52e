"""ASGI entrypoint for the Caloriv admin dashboard."""

from caloriv_admin.api.app import create_app
from caloriv_admin.containers import build_container

app = create_app(build_container())
