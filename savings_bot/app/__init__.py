"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from savings_bot.app.api.routes import api_bp
from savings_bot.config import Settings
from savings_bot.logging_config import setup_logging
from savings_bot.services.quotes import StockQuoteProvider
from savings_bot.services.rates import ExchangeRateProvider
from savings_bot.services.storage import JsonStateStore

EXTENSION_KEY = "savings_bot"


def create_app(
    settings: Optional[Settings] = None,
    rate_provider: Optional[ExchangeRateProvider] = None,
    quote_provider: Optional[StockQuoteProvider] = None,
    state_store: Optional[JsonStateStore] = None,
) -> Flask:
    """Build the Flask app instance. Collaborators can be injected for tests."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {
        "settings": settings,
        "rates": rate_provider
        or ExchangeRateProvider(
            url=settings.exchange_rate_url,
            default_rate=settings.default_exchange_rate,
            ttl=settings.exchange_rate_ttl,
            timeout=settings.http_timeout,
        ),
        "quotes": quote_provider
        or StockQuoteProvider(
            url=settings.stock_chart_url,
            ttl=settings.stock_quote_ttl,
            timeout=settings.http_timeout,
        ),
        "store": state_store or JsonStateStore(settings.state_path),
    }

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
