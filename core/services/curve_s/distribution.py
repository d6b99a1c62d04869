from __future__ import annotations

from datetime import date

from core.domain import Resource, Task
from core.services.curve_s.models import WeekBucket


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def task_planned_cost(task: Task, resource: Resource) -> float:
    # A crew is priced as one unit; individual resources scale with headcount.
    headcount = 1 if resource.is_crew else int(task.estimated_headcount or 0)
    return float(task.estimated_hours or 0.0) * headcount * float(resource.hourly_cost or 0.0)


def distribute_task_cost_by_week(
    task_start: date,
    task_end: date,
    cost: float,
    buckets: list[WeekBucket],
) -> float:
    """
    Prorate `cost` over the buckets overlapping [task_start, task_end].

    Each bucket gets cost * overlap_days / task_days (inclusive day counts).
    Returns the amount actually placed; anything outside the buckets is lost.
    """
    task_days = max(1, inclusive_days(task_start, task_end))
    placed = 0.0
    for bucket in buckets:
        overlap_start = max(task_start, bucket.week_start)
        overlap_end = min(task_end, bucket.week_end)
        if overlap_end < overlap_start:
            continue
        share = cost * inclusive_days(overlap_start, overlap_end) / task_days
        bucket.pv += share
        placed += share
    return placed


__all__ = ["inclusive_days", "task_planned_cost", "distribute_task_cost_by_week"]
