"""
Process configuration.

Everything the service needs from the environment is read once by
`load_settings()` at startup and handed to the app factory. Handlers and
repositories never look at `os.environ` themselves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    host: str = "0.0.0.0"
    port: int = 8000
    request_timeout_seconds: float = 30.0
    cors_permissive: bool = True
    run_migrations: bool = True
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout: float = 30.0
    log_level: str = "INFO"


def load_settings() -> Settings:
    # DATABASE_URL is only required once the pool starts (see core.db).
    return Settings(
        database_url=os.environ.get("DATABASE_URL", "").strip(),
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", 8000),
        request_timeout_seconds=_env_float("REQUEST_TIMEOUT_SECONDS", 30.0),
        cors_permissive=_env_bool("CORS_PERMISSIVE", True),
        run_migrations=_env_bool("RUN_MIGRATIONS", True),
        db_pool_min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        db_command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )
