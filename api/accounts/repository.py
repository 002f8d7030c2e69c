"""
Confirmation token persistence.
"""

from __future__ import annotations

from typing import Any

from core import db


async def get_by_confirmation_token(confirmation_token: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, confirmation_token, user_id, created_at
        FROM confirmation_tokens
        WHERE confirmation_token = $1
        """,
        confirmation_token,
    )


async def insert_confirmation_token(*, user_id: int, confirmation_token: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO confirmation_tokens (confirmation_token, user_id)
        VALUES ($1, $2)
        RETURNING id, confirmation_token, user_id, created_at
        """,
        confirmation_token,
        user_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert confirmation token.")
    return row


async def delete_confirmation_token(token_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM confirmation_tokens
        WHERE id = $1
        """,
        token_id,
    )
    return db.affected_rows(status) > 0
