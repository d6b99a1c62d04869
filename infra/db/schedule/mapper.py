from __future__ import annotations

from datetime import datetime, timezone

from core.domain import Schedule
from infra.db.models import ScheduleORM


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def schedule_to_orm(schedule: Schedule) -> ScheduleORM:
    return ScheduleORM(
        id=schedule.id,
        project_id=schedule.project_id,
        name=schedule.name,
        schedule_type=schedule.schedule_type,
        is_baseline=schedule.is_baseline,
        created_at=schedule.created_at,
        version=getattr(schedule, "version", 1),
    )


def schedule_from_orm(obj: ScheduleORM) -> Schedule:
    return Schedule(
        id=obj.id,
        project_id=obj.project_id,
        name=obj.name,
        schedule_type=obj.schedule_type,
        is_baseline=bool(obj.is_baseline),
        created_at=_as_utc(obj.created_at),
        version=obj.version,
    )


__all__ = ["schedule_to_orm", "schedule_from_orm"]
