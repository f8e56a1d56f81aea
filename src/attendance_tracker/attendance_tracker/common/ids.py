from __future__ import annotations

import uuid


def new_id() -> str:
    """Random 128-bit identifier as 32 hex chars."""
    return uuid.uuid4().hex
