from __future__ import annotations

from core.domain import Task
from infra.db.models import TaskORM


def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        schedule_id=task.schedule_id,
        name=task.name,
        start_date=task.start_date,
        end_date=task.end_date,
        estimated_hours=task.estimated_hours,
        estimated_headcount=task.estimated_headcount,
        resource_id=task.resource_id,
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        schedule_id=obj.schedule_id,
        name=obj.name,
        start_date=obj.start_date,
        end_date=obj.end_date,
        estimated_hours=float(obj.estimated_hours or 0.0),
        estimated_headcount=int(obj.estimated_headcount or 0),
        resource_id=obj.resource_id,
    )


__all__ = ["task_to_orm", "task_from_orm"]
