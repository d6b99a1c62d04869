from __future__ import annotations

from datetime import date, timedelta

from core.services.curve_s.models import WeekBucket

WEEK_DAYS = 7


def week_label(index: int, week_start: date) -> str:
    return f"W{index + 1:02d} {week_start:%d/%m}"


def build_week_buckets(range_start: date, range_end: date) -> list[WeekBucket]:
    """
    Split [range_start, range_end] into consecutive 7-day buckets.

    The first bucket starts on range_start (not on a calendar Monday). The last
    bucket is not clipped, so its week_end may fall after range_end.
    """
    if range_end < range_start:
        raise ValueError(
            f"range_end {range_end.isoformat()} is before range_start {range_start.isoformat()}"
        )

    buckets: list[WeekBucket] = []
    week_start = range_start
    while week_start <= range_end:
        buckets.append(
            WeekBucket(
                week_start=week_start,
                week_end=week_start + timedelta(days=WEEK_DAYS - 1),
                label=week_label(len(buckets), week_start),
            )
        )
        week_start += timedelta(days=WEEK_DAYS)
    return buckets


__all__ = ["WEEK_DAYS", "week_label", "build_week_buckets"]
