from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.domain import Schedule
from core.interfaces import ScheduleRepository
from infra.db.models import ScheduleORM, TaskORM
from infra.db.optimistic import update_with_version_check
from infra.db.schedule.mapper import schedule_from_orm, schedule_to_orm


class SqlAlchemyScheduleRepository(ScheduleRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, schedule: Schedule) -> None:
        self.session.add(schedule_to_orm(schedule))

    def update(self, schedule: Schedule) -> None:
        schedule.version = update_with_version_check(
            self.session,
            ScheduleORM,
            schedule.id,
            getattr(schedule, "version", 1),
            {
                "name": schedule.name,
                "schedule_type": schedule.schedule_type,
                "is_baseline": schedule.is_baseline,
            },
            not_found_message="Schedule not found.",
            stale_message="Schedule was updated by another user.",
        )

    def delete(self, schedule_id: str) -> None:
        # SQLite does not enforce ON DELETE CASCADE unless foreign keys are enabled.
        self.session.execute(delete(TaskORM).where(TaskORM.schedule_id == schedule_id))
        row = self.session.get(ScheduleORM, schedule_id)
        if row:
            self.session.delete(row)

    def get(self, schedule_id: str) -> Optional[Schedule]:
        row = self.session.get(ScheduleORM, schedule_id)
        return schedule_from_orm(row) if row else None

    def list_for_project(self, project_id: str) -> List[Schedule]:
        stmt = (
            select(ScheduleORM)
            .where(ScheduleORM.project_id == project_id)
            .order_by(ScheduleORM.created_at.desc())
        )
        rows = self.session.execute(stmt).scalars().all()
        return [schedule_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyScheduleRepository"]
