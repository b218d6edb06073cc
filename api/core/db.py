"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. The app lifespan initializes it on
startup and closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure raised while running a statement is re-raised as
`core.errors.StoreError` so routes only ever see one store error type.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .config import Settings
from .errors import StoreError

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None
_pool_command_timeout: float | None = None

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(settings: Settings) -> str:
    url = settings.database_url.strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool(settings: Settings) -> None:
    global _pool, _pool_command_timeout
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(settings),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )
    _pool_command_timeout = settings.db_command_timeout
    logger.info(
        "db_pool_ready min_size=%s max_size=%s",
        settings.db_pool_min_size,
        settings.db_pool_max_size,
    )


async def close_pool() -> None:
    global _pool, _pool_command_timeout
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    _pool_command_timeout = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _timeout_message() -> str:
    timeout = _pool_command_timeout
    if timeout is None:
        return "database query timed out"
    return f"database query timed out after {timeout:g}s"


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    # The pool checks the connection out and back in around each call, including on cancellation.
    try:
        row = await pool().fetchrow(sql, *args)
    except asyncio.TimeoutError as exc:
        raise StoreError(_timeout_message()) from exc
    except _DRIVER_ERRORS as exc:
        raise StoreError(str(exc)) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except asyncio.TimeoutError as exc:
        raise StoreError(_timeout_message()) from exc
    except _DRIVER_ERRORS as exc:
        raise StoreError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]

