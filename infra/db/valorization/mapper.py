from __future__ import annotations

from core.domain import Valorization
from infra.db.models import ValorizationORM


def valorization_to_orm(v: Valorization) -> ValorizationORM:
    return ValorizationORM(
        id=v.id,
        project_id=v.project_id,
        number=v.number,
        period_start=v.period_start,
        period_end=v.period_end,
        amount=v.amount,
        status=v.status,
        version=getattr(v, "version", 1),
    )


def valorization_from_orm(obj: ValorizationORM) -> Valorization:
    return Valorization(
        id=obj.id,
        project_id=obj.project_id,
        number=obj.number,
        period_start=obj.period_start,
        period_end=obj.period_end,
        amount=float(obj.amount or 0.0),
        status=obj.status,
        version=obj.version,
    )


__all__ = ["valorization_to_orm", "valorization_from_orm"]
