"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _positive_int_env(name: str, default: int) -> int:
    """Read a positive integer setting; anything else falls back to ``default``."""

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Reward calculation
    TICKET_PRICE: int = _positive_int_env("TICKET_PRICE", 1000)
    CURRENCY_SUFFIX: str = os.getenv("CURRENCY_SUFFIX", "원")
    CURRENCY_SEPARATOR: str = os.getenv("CURRENCY_SEPARATOR", ",")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
