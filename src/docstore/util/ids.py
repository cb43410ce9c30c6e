from __future__ import annotations

from uuid import uuid4


def new_id() -> str:
    """Random 128-bit identifier in canonical uuid form."""
    return str(uuid4())
