"""Health-check payload."""

from savings_bot import __version__
from savings_bot.schemas.ping import PingResponse


def get_health() -> PingResponse:
    return PingResponse(message="pong", service="savings-bot", version=__version__)
