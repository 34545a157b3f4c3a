"""Random idempotency keys."""

from __future__ import annotations

import secrets


def new_key() -> str:
    """Return 16 random bytes as a lower-case hex string."""
    return secrets.token_hex(16)