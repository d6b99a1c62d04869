from infra.db.schedule.mapper import schedule_from_orm, schedule_to_orm
from infra.db.schedule.repository import SqlAlchemyScheduleRepository

__all__ = [
    "schedule_from_orm",
    "schedule_to_orm",
    "SqlAlchemyScheduleRepository",
]
