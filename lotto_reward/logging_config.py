"""Logging configuration."""

from __future__ import annotations

import logging

from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain stdlib logging from the LOG_LEVEL setting."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logging.getLogger("lotto_reward").setLevel(level)
    # Werkzeug logs every request at INFO.
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
