"""
Account schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ConfirmationToken(BaseModel):
    id: int
    confirmation_token: str
    user_id: int
    created_at: datetime | None = None
