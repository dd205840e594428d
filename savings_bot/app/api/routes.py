"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

import numpy as np
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from savings_bot.core.advisor import generate_recommendations
from savings_bot.core.contributors import (
    aggregate,
    contributor_labels,
    parse_names,
    resolve_people_count,
)
from savings_bot.core.currency import convert
from savings_bot.core.metrics import (
    derive_summary,
    fixed_timeline,
    return_percentage,
    saver_cards,
    savings_for_period,
    yearly_breakdown,
)
from savings_bot.core.ping import get_health
from savings_bot.core.projection import MONTHS_PER_YEAR, simulate
from savings_bot.core.waves import label_waves
from savings_bot.domain.investment import InvestmentInputError, prepare_projection_input
from savings_bot.models import RISK_PROFILES
from savings_bot.schemas.currency import ConvertRequest, ConvertResponse
from savings_bot.schemas.investment import InvestmentRequest, InvestmentResponse
from savings_bot.schemas.quotes import StockResponse
from savings_bot.schemas.savings import (
    GroupSavingsRequest,
    GroupSavingsResponse,
    TimelineRequest,
    TimelineResponse,
)
from savings_bot.schemas.state import SavedState
from savings_bot.services.quotes import summarize_quotes

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _deps() -> Dict[str, Any]:
    return current_app.extensions["savings_bot"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False) or {}


def _json(model) -> Any:
    return jsonify(model.model_dump(mode="json"))


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvestmentInputError)
def _handle_investment_error(exc: InvestmentInputError):
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return _json(get_health())


@api_bp.get("/risk-profiles")
def risk_profiles() -> Any:
    return jsonify([profile.model_dump(mode="json") for profile in RISK_PROFILES.values()])


@api_bp.post("/savings/timeline")
def savings_timeline() -> Any:
    """Linear savings for the chosen horizon plus the fixed 1..5 year timeline."""
    payload = TimelineRequest.model_validate(_payload())
    response = TimelineResponse(
        monthly_saving=payload.monthly_saving,
        years=payload.years,
        months=payload.years * MONTHS_PER_YEAR,
        total_saved=savings_for_period(payload.monthly_saving, payload.years),
        timeline=fixed_timeline(payload.monthly_saving),
    )
    return _json(response)


@api_bp.post("/savings/group")
def group_savings() -> Any:
    payload = GroupSavingsRequest.model_validate(_payload())
    contributors = parse_names(payload.investor_names)
    names = contributor_labels(contributors)
    people = resolve_people_count(payload.people_count, contributors)
    totals = aggregate(people, payload.per_person_amount)

    response = GroupSavingsResponse(
        aggregate=totals,
        names=names,
        years=payload.years,
        months=payload.years * MONTHS_PER_YEAR,
        total_saved=savings_for_period(totals.monthly_total, payload.years),
        per_person_total=savings_for_period(totals.per_person_monthly, payload.years),
        savers=saver_cards(totals.per_person_monthly, names, payload.years),
        timeline=fixed_timeline(totals.monthly_total),
    )
    return _json(response)


@api_bp.post("/investment/simulate")
def investment_simulate() -> Any:
    """Run the investment bot: projection, summary, advice and wave labels."""
    payload = InvestmentRequest.model_validate(_payload())
    projection_input = prepare_projection_input(payload)

    rng = np.random.default_rng(payload.seed) if payload.seed is not None else None
    series = simulate(projection_input, rng=rng)
    summary = derive_summary(series)

    logger.info(
        "investment simulation: %s/%s, %.2f x %d years -> %.2f",
        projection_input.strategy.value,
        projection_input.risk.value,
        projection_input.amount,
        projection_input.years,
        summary.final_value,
    )

    response = InvestmentResponse(
        risk_profile=projection_input.risk,
        strategy=projection_input.strategy,
        monthly_amount=projection_input.amount,
        years=projection_input.years,
        summary=summary,
        return_percentage=return_percentage(summary),
        projection=yearly_breakdown(series),
        recommendations=generate_recommendations(
            summary,
            projection_input.risk,
            projection_input.strategy,
            projection_input.amount,
            projection_input.years,
        ),
        waves=label_waves(series),
    )
    return _json(response)


@api_bp.get("/currency/rate")
def currency_rate() -> Any:
    return _json(_deps()["rates"].get_rate())


@api_bp.post("/currency/convert")
def currency_convert() -> Any:
    payload = ConvertRequest.model_validate(_payload())
    rate = _deps()["rates"].get_rate()
    response = ConvertResponse(
        amount=payload.amount,
        converted=convert(payload.amount, rate.rate, payload.direction),
        direction=payload.direction,
        rate=rate,
    )
    return _json(response)


@api_bp.get("/stocks/<symbol>")
def stock_history(symbol: str) -> Any:
    return _stock_response(symbol)


@api_bp.get("/stocks")
def default_stock_history() -> Any:
    return _stock_response(_deps()["settings"].stock_symbol)


def _stock_response(symbol: str) -> Any:
    history = _deps()["quotes"].get_history(symbol)
    summary = summarize_quotes(history.points)
    return _json(StockResponse(**history.model_dump(), summary=summary))


@api_bp.get("/state")
def load_state() -> Any:
    state = _deps()["store"].load()
    return _json(state or SavedState())


@api_bp.put("/state")
def save_state() -> Any:
    state = SavedState.model_validate(_payload())
    store = _deps()["store"]
    store.save(state)
    # reload so the reply carries the canonical names
    return _json(store.load() or state)
