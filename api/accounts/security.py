"""
Confirmation token generation.
"""

from __future__ import annotations

import os
import secrets

DEFAULT_TOKEN_BYTES = 32


def confirmation_token_bytes() -> int:
    raw = os.environ.get("CONFIRMATION_TOKEN_BYTES", "").strip()
    if not raw:
        return DEFAULT_TOKEN_BYTES
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_TOKEN_BYTES
    return value if value > 0 else DEFAULT_TOKEN_BYTES


def build_confirmation_token() -> str:
    # URL-safe so it can be embedded in a verification link as-is.
    return secrets.token_urlsafe(confirmation_token_bytes())
