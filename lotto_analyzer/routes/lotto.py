"""Lotto analysis routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotto_analyzer.errors import ValidationError
from lotto_analyzer.schemas.analysis import (
    AnalysisResponseSchema,
    AnalyzeQuerySchema,
    StatisticsResponseSchema,
)
from lotto_analyzer.services.lotto_analysis_service import LottoAnalysisService
from lotto_analyzer.utils.responses import ok

lotto_bp = Blueprint("lotto", __name__)

_query_schema = AnalyzeQuerySchema()
_analysis_schema = AnalysisResponseSchema()
_statistics_schema = StatisticsResponseSchema()


def _service() -> LottoAnalysisService:
    return current_app.extensions["lotto_analysis_service"]


def _window_size() -> int:
    """Resolve `count` from the query string against the configured window limits."""

    data = _query_schema.load(request.args)
    count = data.get("count")
    if count is None:
        return int(current_app.config.get("LOTTO_DEFAULT_WINDOW", 10))

    max_window = int(current_app.config.get("LOTTO_MAX_WINDOW", 100))
    if count > max_window:
        raise ValidationError(
            message="Invalid count",
            details={"count": [f"Must be <= {max_window}"]},
        )
    return int(count)


@lotto_bp.get("/lotto/analyze")
def get_analysis():
    """Statistics for the last `count` draws plus model-suggested combinations.

    Query params:
    - count: optional window size (default LOTTO_DEFAULT_WINDOW)
    """

    result = _service().analyze(_window_size())
    return ok(result, schema=_analysis_schema)


@lotto_bp.get("/lotto/statistics")
def get_statistics():
    result = _service().statistics(_window_size())
    return ok(result, schema=_statistics_schema)
