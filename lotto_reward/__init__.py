"""Lotto winning statistics service."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask


def create_app() -> Flask:
    """Application factory.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotto_reward.config import get_config
    from lotto_reward.error_handlers import register_error_handlers
    from lotto_reward.logging_config import configure_logging
    from lotto_reward.routes.health import health_bp
    from lotto_reward.routes.reward import reward_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    # JSON bodies carry Korean report rows.
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    configure_logging(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(reward_bp)

    return app
