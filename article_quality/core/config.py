from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})

DEFAULT_MIN_QUALITY_SCORE = 70
DEFAULT_MAX_REGENERATION_ATTEMPTS = 3
DEFAULT_MAX_TAGS = 5
DEFAULT_BATCH_WORKERS = 4
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def _env_str(name: str, default: str | None = None) -> str | None:
    """Empty strings count as unset."""
    raw = os.getenv(name)
    return raw if raw else default


def _env_flag(name: str, default: bool) -> bool:
    raw = _env_str(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return minimum
    return value


def _env_csv(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = _env_str(name)
    items = tuple(part.strip() for part in (raw or "").split(",") if part.strip())
    return items or default


def is_quality_check_enabled() -> bool:
    """Quality checks stay on unless QUALITY_CHECK_ENABLED is explicitly 'false'."""
    raw = _env_str("QUALITY_CHECK_ENABLED")
    return raw is None or raw.strip().lower() != "false"


def get_min_quality_score() -> int:
    return _env_int("QUALITY_MIN_SCORE", DEFAULT_MIN_QUALITY_SCORE)


def get_max_regeneration_attempts() -> int:
    return _env_int("MAX_REGENERATION_ATTEMPTS", DEFAULT_MAX_REGENERATION_ATTEMPTS)


@dataclass(frozen=True)
class QualitySettings:
    enabled: bool = True
    min_score: int = DEFAULT_MIN_QUALITY_SCORE
    max_regeneration_attempts: int = DEFAULT_MAX_REGENERATION_ATTEMPTS
    max_tags: int = DEFAULT_MAX_TAGS
    batch_max_workers: int = DEFAULT_BATCH_WORKERS


def load_quality_settings() -> QualitySettings:
    """Snapshot the quality-related environment into an immutable record."""
    return QualitySettings(
        enabled=is_quality_check_enabled(),
        min_score=get_min_quality_score(),
        max_regeneration_attempts=get_max_regeneration_attempts(),
        max_tags=_env_int("ARTICLE_MAX_TAGS", DEFAULT_MAX_TAGS),
        batch_max_workers=_env_int("BATCH_MAX_WORKERS", DEFAULT_BATCH_WORKERS, minimum=1),
    )


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    cors_allowed_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    cors_allow_credentials: bool = False
    quality: QualitySettings = field(default_factory=QualitySettings)


def load_settings() -> Settings:
    return Settings(
        api_key=_env_str("API_KEY"),
        rate_limit=_env_str("RATE_LIMIT", "60/minute"),
        rate_limit_enabled=_env_flag("RATE_LIMIT_ENABLED", True),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        sentry_dsn=_env_str("SENTRY_DSN"),
        cors_allowed_origins=_env_csv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS),
        cors_allow_credentials=_env_flag("CORS_ALLOW_CREDENTIALS", False),
        quality=load_quality_settings(),
    )


settings = load_settings()
