"""Shared helpers for in-memory entity rows."""

import uuid


def new_id() -> str:
    """Generate a fresh entity id."""
    return uuid.uuid4().hex
