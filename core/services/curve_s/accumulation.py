from __future__ import annotations

from core.services.curve_s.models import WeekBucket


def accumulate_buckets(buckets: list[WeekBucket]) -> None:
    """Fill pv_cumulative/ev_cumulative in place; buckets must be ordered by week_start."""
    pv_running = 0.0
    ev_running = 0.0
    for bucket in buckets:
        pv_running += bucket.pv
        ev_running += bucket.ev
        bucket.pv_cumulative = pv_running
        bucket.ev_cumulative = ev_running


__all__ = ["accumulate_buckets"]
