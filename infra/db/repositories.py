# infra/db/repositories.py
from __future__ import annotations

from infra.db.project import SqlAlchemyProjectRepository
from infra.db.resource import SqlAlchemyResourceRepository
from infra.db.schedule import SqlAlchemyScheduleRepository
from infra.db.task import SqlAlchemyTaskRepository
from infra.db.valorization import SqlAlchemyValorizationRepository

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyResourceRepository",
    "SqlAlchemyScheduleRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyValorizationRepository",
]
