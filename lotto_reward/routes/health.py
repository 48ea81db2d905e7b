"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from lotto_reward.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    return ok({"status": "ok"})
