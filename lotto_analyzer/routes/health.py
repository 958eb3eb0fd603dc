"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from lotto_analyzer.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness probe; does not touch the upstream API or the model."""

    return ok({"status": "ok"})
