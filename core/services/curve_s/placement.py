from __future__ import annotations

from datetime import date

from core.services.curve_s.models import WeekBucket


def place_valorization_in_week(period_end: date, amount: float, buckets: list[WeekBucket]) -> bool:
    # Buckets never overlap, so the first match is the only one.
    for bucket in buckets:
        if bucket.contains(period_end):
            bucket.ev += float(amount or 0.0)
            return True
    return False


__all__ = ["place_valorization_in_week"]
