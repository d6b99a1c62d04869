from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Valorization
from core.interfaces import ValorizationRepository
from infra.db.models import ValorizationORM
from infra.db.optimistic import update_with_version_check
from infra.db.valorization.mapper import valorization_from_orm, valorization_to_orm


class SqlAlchemyValorizationRepository(ValorizationRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, valorization: Valorization) -> None:
        self.session.add(valorization_to_orm(valorization))

    def update(self, valorization: Valorization) -> None:
        valorization.version = update_with_version_check(
            self.session,
            ValorizationORM,
            valorization.id,
            getattr(valorization, "version", 1),
            {
                "period_start": valorization.period_start,
                "period_end": valorization.period_end,
                "amount": valorization.amount,
                "status": valorization.status,
            },
            not_found_message="Valorization not found.",
            stale_message="Valorization was updated by another user.",
        )

    def get(self, valorization_id: str) -> Optional[Valorization]:
        obj = self.session.get(ValorizationORM, valorization_id)
        return valorization_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Valorization]:
        stmt = (
            select(ValorizationORM)
            .where(ValorizationORM.project_id == project_id)
            .order_by(ValorizationORM.number)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [valorization_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyValorizationRepository"]
