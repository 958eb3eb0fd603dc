"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Upstream draw results (dhlottery JSON endpoint)
    LOTTO_API_URL: str = os.getenv("LOTTO_API_URL", "https://www.dhlottery.co.kr/common.do")
    LOTTO_FETCH_TIMEOUT: float = _env_float("LOTTO_FETCH_TIMEOUT", 5.0)
    LOTTO_FETCH_RETRIES: int = _env_int("LOTTO_FETCH_RETRIES", 2)
    LOTTO_FETCH_BACKOFF: float = _env_float("LOTTO_FETCH_BACKOFF", 0.3)
    LOTTO_FETCH_WORKERS: int = _env_int("LOTTO_FETCH_WORKERS", 10)

    # Analysis window
    LOTTO_DEFAULT_WINDOW: int = _env_int("LOTTO_DEFAULT_WINDOW", 10)
    LOTTO_MAX_WINDOW: int = _env_int("LOTTO_MAX_WINDOW", 100)

    # Recommendation model
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    RECOMMENDATION_SETS: int = _env_int("RECOMMENDATION_SETS", 2)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    DEBUG: bool = False
    TESTING: bool = True
    GEMINI_API_KEY: str = ""


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
