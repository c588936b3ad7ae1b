"""Identifier generation for study items."""

import uuid


def generate_item_id() -> str:
    """Return a new opaque, collision-resistant study item id (32 hex chars)."""
    return uuid.uuid4().hex
