"""ASGI entrypoint for the RestoCafe API."""

from restocafe.api.app import create_app
from restocafe.containers import build_container

app = create_app(build_container())
