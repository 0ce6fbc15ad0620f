"""ASGI entrypoint for the ticket purchase API."""

from ticket_purchase.api.app import create_app
from ticket_purchase.containers import build_container

app = create_app(build_container())
