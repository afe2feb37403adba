from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    rank_rate_limit: str
    trust_x_forwarded_for: bool
    cors_allowed_origins: tuple[str, ...]
    match_rank_max_jobs: int


def load_settings() -> Settings:
    return Settings(
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        rate_limit=_get_env("RATE_LIMIT", "120/minute") or "120/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        rank_rate_limit=_get_env("RANK_RATE_LIMIT", "30/minute") or "30/minute",
        trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", False),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://localhost:3000",
            ],
        ),
        match_rank_max_jobs=_get_env_int("MATCH_RANK_MAX_JOBS", 500),
    )


settings = load_settings()

if settings.match_rank_max_jobs <= 0:
    raise RuntimeError("MATCH_RANK_MAX_JOBS must be greater than 0.")
