from __future__ import annotations

import logging

from core.exceptions import BusinessRuleError, NotFoundError
from core.interfaces import (
    ProjectRepository,
    ResourceRepository,
    ScheduleRepository,
    TaskRepository,
    ValorizationRepository,
)
from core.services.curve_s.engine import compute_curve_s, select_schedule
from core.services.curve_s.models import CurveSResult, CurveSSnapshot, PlannedTask

logger = logging.getLogger(__name__)


class CurveSService:
    """Read-only service: loads a project snapshot and runs the S-curve engine on it."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        schedule_repo: ScheduleRepository,
        task_repo: TaskRepository,
        resource_repo: ResourceRepository,
        valorization_repo: ValorizationRepository,
    ):
        self._project_repo: ProjectRepository = project_repo
        self._schedule_repo: ScheduleRepository = schedule_repo
        self._task_repo: TaskRepository = task_repo
        self._resource_repo: ResourceRepository = resource_repo
        self._valorization_repo: ValorizationRepository = valorization_repo

    def load_snapshot(self, project_id: str) -> CurveSSnapshot:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        if project.bac is None:
            raise BusinessRuleError(
                "Project has no contractual total; BAC cannot be determined.",
                code="PROJECT_WITHOUT_BAC",
            )

        schedule, has_baseline = select_schedule(self._schedule_repo.list_for_project(project_id))

        planned: list[PlannedTask] = []
        if schedule is not None:
            resources = {r.id: r for r in self._resource_repo.list_all()}
            for task in self._task_repo.list_by_schedule(schedule.id):
                if not task.is_dated or not task.resource_id:
                    continue
                resource = resources.get(task.resource_id)
                if resource is None:
                    logger.warning("Task %s references unknown resource %s; skipped", task.id, task.resource_id)
                    continue
                planned.append(PlannedTask(task=task, resource=resource))

        valorizations = tuple(v for v in self._valorization_repo.list_by_project(project_id) if v.is_recognized)

        return CurveSSnapshot(
            project=project,
            bac=project.bac,
            schedule=schedule,
            has_baseline=has_baseline,
            tasks=tuple(planned),
            valorizations=valorizations,
            actual_cost=project.actual_cost,
        )

    def get_curve_s(self, project_id: str) -> CurveSResult:
        snapshot = self.load_snapshot(project_id)
        result = compute_curve_s(snapshot)
        logger.info(
            "Computed curve S for project %s (%s): %d weeks, baseline=%s",
            snapshot.project.id,
            snapshot.project.code,
            len(result.weeks),
            result.has_baseline,
        )
        return result


__all__ = ["CurveSService"]
