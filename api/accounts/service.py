"""
Confirmation token lookup and issuing.
"""

from __future__ import annotations

import logging

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_token(row: dict) -> schemas.ConfirmationToken:
    return schemas.ConfirmationToken(
        id=int(row["id"]),
        confirmation_token=str(row["confirmation_token"]),
        user_id=int(row["user_id"]),
        created_at=row.get("created_at"),
    )


async def find_confirmation_token(confirmation_token: str) -> schemas.ConfirmationToken | None:
    token = (confirmation_token or "").strip()
    if not token:
        return None

    row = await repository.get_by_confirmation_token(token)
    if row is None:
        return None
    return _to_token(row)


async def issue_confirmation_token(user_id: int) -> schemas.ConfirmationToken:
    row = await repository.insert_confirmation_token(
        user_id=user_id,
        confirmation_token=security.build_confirmation_token(),
    )
    logger.info("confirmation_token_issued id=%s user_id=%s", row["id"], user_id)
    return _to_token(row)
