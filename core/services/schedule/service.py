from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.domain import Schedule, ScheduleType, Task
from core.exceptions import BusinessRuleError, NotFoundError
from core.interfaces import ProjectRepository, ResourceRepository, ScheduleRepository, TaskRepository
from core.services.schedule.validation import TaskValidationMixin

logger = logging.getLogger(__name__)


class ScheduleService(TaskValidationMixin):
    """
    Schedules and their tasks.

    Keeps the one-baseline-per-project rule: the first planning schedule of a
    project becomes its baseline, and promoting another schedule demotes the
    previous baseline in the same transaction.
    """

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        schedule_repo: ScheduleRepository,
        task_repo: TaskRepository,
        resource_repo: ResourceRepository,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._schedule_repo: ScheduleRepository = schedule_repo
        self._task_repo: TaskRepository = task_repo
        self._resource_repo: ResourceRepository = resource_repo

    def create_schedule(
        self,
        project_id: str,
        name: str,
        schedule_type: ScheduleType = ScheduleType.PLANNING,
        is_baseline: Optional[bool] = None,
    ) -> Schedule:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        schedule_type = ScheduleType(schedule_type)
        existing = self._schedule_repo.list_for_project(project_id)
        if is_baseline is None:
            is_baseline = schedule_type == ScheduleType.PLANNING and not any(
                s.schedule_type == ScheduleType.PLANNING for s in existing
            )

        schedule = Schedule.create(project_id, name, schedule_type=schedule_type, is_baseline=is_baseline)
        try:
            if is_baseline:
                self._demote_baselines(existing)
            self._schedule_repo.add(schedule)
            self._session.commit()
            logger.info(
                "Created %s schedule %s for project %s (baseline=%s)",
                schedule.schedule_type.value,
                schedule.id,
                project_id,
                schedule.is_baseline,
            )
            return schedule
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating schedule: %s", e)
            raise

    def set_baseline(self, schedule_id: str) -> Schedule:
        schedule = self._get_schedule(schedule_id)
        if schedule.is_baseline:
            return schedule

        others = [s for s in self._schedule_repo.list_for_project(schedule.project_id) if s.id != schedule.id]
        try:
            self._demote_baselines(others)
            schedule.is_baseline = True
            self._schedule_repo.update(schedule)
            self._session.commit()
            logger.info("Schedule %s is now the baseline of project %s", schedule.id, schedule.project_id)
            return schedule
        except Exception as e:
            self._session.rollback()
            logger.error("Error setting baseline schedule: %s", e)
            raise

    def delete_schedule(self, schedule_id: str) -> None:
        schedule = self._get_schedule(schedule_id)
        if schedule.is_baseline:
            raise BusinessRuleError("The baseline schedule cannot be deleted.", code="SCHEDULE_IS_BASELINE")
        if schedule.schedule_type == ScheduleType.COMMERCIAL:
            raise BusinessRuleError("Commercial schedules are read-only.", code="SCHEDULE_READ_ONLY")
        if len(self._schedule_repo.list_for_project(schedule.project_id)) <= 1:
            raise BusinessRuleError("The last schedule of a project cannot be deleted.", code="SCHEDULE_LAST")

        try:
            self._schedule_repo.delete(schedule_id)
            self._session.commit()
            logger.info("Deleted schedule %s", schedule_id)
        except Exception as e:
            self._session.rollback()
            logger.error("Error deleting schedule: %s", e)
            raise

    def list_schedules(self, project_id: str) -> List[Schedule]:
        return self._schedule_repo.list_for_project(project_id)

    def add_task(
        self,
        schedule_id: str,
        name: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        estimated_hours: float = 0.0,
        estimated_headcount: int = 1,
        resource_id: Optional[str] = None,
    ) -> Task:
        self._get_schedule(schedule_id)
        self._validate_task_name(name)
        self._validate_task_dates(start_date, end_date)
        self._validate_task_effort(estimated_hours, estimated_headcount)
        self._validate_task_resource(resource_id)

        task = Task.create(
            schedule_id,
            name.strip(),
            start_date=start_date,
            end_date=end_date,
            estimated_hours=float(estimated_hours),
            estimated_headcount=int(estimated_headcount),
            resource_id=resource_id,
        )
        try:
            self._task_repo.add(task)
            self._session.commit()
            logger.info("Created task %s - %s for schedule %s", task.id, task.name, schedule_id)
            return task
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating task: %s", e)
            raise

    def list_tasks(self, schedule_id: str) -> List[Task]:
        return self._task_repo.list_by_schedule(schedule_id)

    def _get_schedule(self, schedule_id: str) -> Schedule:
        schedule = self._schedule_repo.get(schedule_id)
        if not schedule:
            raise NotFoundError("Schedule not found.", code="SCHEDULE_NOT_FOUND")
        return schedule

    def _demote_baselines(self, schedules: List[Schedule]) -> None:
        for other in schedules:
            if other.is_baseline:
                other.is_baseline = False
                self._schedule_repo.update(other)


__all__ = ["ScheduleService"]
