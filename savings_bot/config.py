"""
Runtime configuration.
Read from the environment (after loading .env) with SAVINGS_BOT_* variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from savings_bot.services.quotes import CHART_URL, QUOTE_TTL_SECONDS
from savings_bot.services.rates import DEFAULT_EUR_USD, DEFAULT_RATE_URL, RATE_TTL_SECONDS

ENV_PREFIX = "SAVINGS_BOT_"
PACKAGE_ROOT = Path(__file__).parent
DEFAULT_STATE_PATH = PACKAGE_ROOT.parent / "data" / "state.json"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name, default)


@dataclass(frozen=True)
class Settings:
    cors_origins: List[str] = field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )
    exchange_rate_url: str = DEFAULT_RATE_URL
    default_exchange_rate: float = DEFAULT_EUR_USD
    exchange_rate_ttl: float = RATE_TTL_SECONDS
    stock_chart_url: str = CHART_URL
    stock_quote_ttl: float = QUOTE_TTL_SECONDS
    stock_symbol: str = "VUG"
    http_timeout: float = 10.0
    state_path: Path = DEFAULT_STATE_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        load_dotenv(env_file or PACKAGE_ROOT.parent / ".env")
        defaults = cls()
        origins = _env("CORS_ORIGINS")
        return cls(
            cors_origins=(
                [origin.strip() for origin in origins.split(",") if origin.strip()]
                if origins
                else defaults.cors_origins
            ),
            exchange_rate_url=_env("EXCHANGE_RATE_URL", defaults.exchange_rate_url),
            default_exchange_rate=float(_env("DEFAULT_EXCHANGE_RATE", str(defaults.default_exchange_rate))),
            exchange_rate_ttl=float(_env("EXCHANGE_RATE_TTL", str(defaults.exchange_rate_ttl))),
            stock_chart_url=_env("STOCK_CHART_URL", defaults.stock_chart_url),
            stock_quote_ttl=float(_env("STOCK_QUOTE_TTL", str(defaults.stock_quote_ttl))),
            stock_symbol=_env("STOCK_SYMBOL", defaults.stock_symbol),
            http_timeout=float(_env("HTTP_TIMEOUT", str(defaults.http_timeout))),
            state_path=Path(_env("STATE_PATH", str(defaults.state_path))),
            log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
        )
