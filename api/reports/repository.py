"""
Report persistence (raw SQL).

`posts` and `users` belong to other services; they are only read here.
"""

from __future__ import annotations

from typing import Any

from core import db


async def post_exists(post_id: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM posts
        WHERE id = $1
        LIMIT 1
        """,
        post_id,
    )
    return row is not None


async def user_exists(username: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM users
        WHERE username = $1
        LIMIT 1
        """,
        username,
    )
    return row is not None


async def insert_report(*, post_id: str, username: str, message: str) -> dict[str, Any] | None:
    """
    Insert a report only if its post and reporting user still exist.
    Returns the new row, or None when either reference is gone.
    """
    return await db.fetch_one(
        """
        INSERT INTO reports (username, post_id, message)
        SELECT $2, $1, $3
        WHERE EXISTS (SELECT 1 FROM posts WHERE id = $1)
          AND EXISTS (SELECT 1 FROM users WHERE username = $2)
        RETURNING id, username, post_id, message, created_at
        """,
        post_id,
        username,
        message,
    )


async def list_reports() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, username, post_id, message, created_at
        FROM reports
        ORDER BY id ASC
        """
    )


async def delete_report(report_id: int) -> int:
    """
    Delete a report by id. Returns the number of rows removed (0 or 1).
    """
    status = await db.execute(
        """
        DELETE FROM reports
        WHERE id = $1
        """,
        report_id,
    )
    return db.affected_rows(status)
