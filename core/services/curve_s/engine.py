from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from core.domain import Schedule, Valorization
from core.services.curve_s.accumulation import accumulate_buckets
from core.services.curve_s.buckets import WEEK_DAYS, build_week_buckets
from core.services.curve_s.distribution import distribute_task_cost_by_week, task_planned_cost
from core.services.curve_s.evm import calculate_evm
from core.services.curve_s.models import CurveSResult, CurveSSnapshot, PlannedTask
from core.services.curve_s.placement import place_valorization_in_week

logger = logging.getLogger(__name__)

_COST_TOLERANCE = 1e-6


def select_schedule(schedules: Sequence[Schedule]) -> tuple[Optional[Schedule], bool]:
    """Baseline schedule if any, else the most recently created one, else None."""
    for schedule in schedules:
        if schedule.is_baseline:
            return schedule, True
    if not schedules:
        return None, False
    latest = max(schedules, key=lambda s: s.created_at)
    return latest, False


def eligible_tasks(tasks: Iterable[PlannedTask]) -> list[PlannedTask]:
    out: list[PlannedTask] = []
    for pt in tasks:
        task = pt.task
        if not task.is_dated:
            continue
        if task.end_date < task.start_date:
            logger.warning(
                "Task %s ends (%s) before it starts (%s); excluded from the S-curve",
                task.id,
                task.end_date,
                task.start_date,
            )
            continue
        out.append(pt)
    return out


def eligible_valorizations(valorizations: Iterable[Valorization]) -> list[Valorization]:
    return [v for v in valorizations if v.is_recognized]


def covering_range(
    *,
    tasks: Sequence[PlannedTask],
    valorizations: Sequence[Valorization],
    project_start: Optional[date] = None,
    project_end: Optional[date] = None,
) -> tuple[date, date]:
    days: list[date] = []
    if project_start is not None:
        days.append(project_start)
    if project_end is not None:
        days.append(project_end)
    for pt in tasks:
        days.append(pt.task.start_date)
        days.append(pt.task.end_date)
    days.extend(v.period_end for v in valorizations)

    start, end = min(days), max(days)
    if start == end:
        end = start + timedelta(days=WEEK_DAYS - 1)
    return start, end


def compute_curve_s(snapshot: CurveSSnapshot) -> CurveSResult:
    """
    Planned (PV) and billed (EV) weekly S-curves plus EVM indices for one project.

    Without a schedule only the valorization dates define the range and PV
    stays 0. Without tasks and valorizations the week list is empty.
    """
    project = snapshot.project
    schedule_id = snapshot.schedule.id if snapshot.schedule else None
    notes: list[str] = []

    valorizations = eligible_valorizations(snapshot.valorizations)
    if snapshot.schedule is None:
        tasks: list[PlannedTask] = []
        if snapshot.tasks:
            logger.debug("Project %s has no schedule; ignoring %d tasks", project.id, len(snapshot.tasks))
        notes.append("No schedule found: planned value is not available, EV-only curve.")
    else:
        tasks = eligible_tasks(snapshot.tasks)
        if not snapshot.has_baseline:
            notes.append("No baseline schedule: using the most recently created schedule.")

    if not tasks and not valorizations:
        logger.debug("Project %s has no tasks or valorizations; returning an empty curve", project.id)
        return CurveSResult(
            weeks=[],
            bac=snapshot.bac,
            evm=calculate_evm([], snapshot.bac),
            has_baseline=snapshot.has_baseline,
            schedule_id=schedule_id,
            project=project,
            notes=notes,
        )

    if snapshot.schedule is None:
        range_start, range_end = covering_range(tasks=[], valorizations=valorizations)
    else:
        range_start, range_end = covering_range(
            tasks=tasks,
            valorizations=valorizations,
            project_start=project.start_date,
            project_end=project.end_date,
        )

    weeks = build_week_buckets(range_start, range_end)

    for pt in tasks:
        cost = task_planned_cost(pt.task, pt.resource)
        placed = distribute_task_cost_by_week(pt.task.start_date, pt.task.end_date, cost, weeks)
        if abs(placed - cost) > _COST_TOLERANCE:
            logger.warning("Task %s: %.2f of %.2f planned cost fell outside the curve", pt.task.id, cost - placed, cost)

    for valorization in valorizations:
        if not place_valorization_in_week(valorization.period_end, valorization.amount, weeks):
            logger.warning(
                "Valorization %s (period end %s) fell outside the curve",
                valorization.id,
                valorization.period_end,
            )

    accumulate_buckets(weeks)
    evm = calculate_evm(weeks, snapshot.bac, actual_cost=snapshot.actual_cost)

    logger.debug(
        "Curve S for project %s: %d weeks, %d tasks, %d valorizations (%s..%s)",
        project.id,
        len(weeks),
        len(tasks),
        len(valorizations),
        range_start,
        range_end,
    )
    return CurveSResult(
        weeks=weeks,
        bac=snapshot.bac,
        evm=evm,
        has_baseline=snapshot.has_baseline,
        schedule_id=schedule_id,
        project=project,
        notes=notes,
    )


__all__ = [
    "select_schedule",
    "eligible_tasks",
    "eligible_valorizations",
    "covering_range",
    "compute_curve_s",
]
