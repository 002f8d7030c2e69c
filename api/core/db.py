"""
PostgreSQL access for the report API (asyncpg, raw SQL).

The pool is process-wide. `main.py` opens it in the FastAPI lifespan and
closes it on shutdown; repositories only ever go through the helpers below.

Placeholders are asyncpg-style: $1, $2, ...
"""

from __future__ import annotations

import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

_pool: asyncpg.Pool | None = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _strip_sslmode(url: str) -> str:
    # libpq understands sslmode in the DSN, asyncpg rejects it.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _strip_sslmode(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=_env_int("DB_COMMAND_TIMEOUT_S", 30),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    rows = await pool().fetch(sql, *args)
    return [dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement without a result set.

    Returns asyncpg's command status, e.g. "DELETE 1" or "INSERT 0 1".
    """
    return await pool().execute(sql, *args)


def affected_rows(command_status: str) -> int:
    """
    Row count from a command status string ("DELETE 3" -> 3).
    """
    tail = (command_status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0
