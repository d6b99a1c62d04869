from __future__ import annotations

from core.domain import Project
from infra.db.models import ProjectORM


def project_to_orm(p: Project) -> ProjectORM:
    return ProjectORM(
        id=p.id,
        code=p.code,
        name=p.name,
        start_date=p.start_date,
        end_date=p.end_date,
        contract_total=p.contract_total,
        actual_cost=p.actual_cost,
        currency=p.currency,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        code=obj.code,
        name=obj.name,
        start_date=obj.start_date,
        end_date=obj.end_date,
        contract_total=obj.contract_total,
        actual_cost=obj.actual_cost,
        currency=obj.currency,
    )


__all__ = ["project_to_orm", "project_from_orm"]
