from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Task
from core.interfaces import TaskRepository
from infra.db.models import TaskORM
from infra.db.task.mapper import task_from_orm, task_to_orm


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> None:
        self.session.add(task_to_orm(task))

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_schedule(self, schedule_id: str) -> List[Task]:
        stmt = (
            select(TaskORM)
            .where(TaskORM.schedule_id == schedule_id)
            .order_by(TaskORM.start_date, TaskORM.name)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyTaskRepository"]
