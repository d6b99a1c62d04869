from __future__ import annotations

import uuid
from datetime import datetime, timezone


def generate_id() -> str:
    """Opaque string id for new domain records."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = ["generate_id", "utc_now"]
