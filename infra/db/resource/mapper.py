from __future__ import annotations

from core.domain import Resource
from infra.db.models import ResourceORM


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        name=resource.name,
        resource_type=resource.resource_type,
        hourly_cost=resource.hourly_cost,
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        name=obj.name,
        resource_type=obj.resource_type,
        hourly_cost=float(obj.hourly_cost or 0.0),
    )


__all__ = ["resource_to_orm", "resource_from_orm"]
