from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from core.domain import Resource, ResourceType
from core.exceptions import ValidationError
from core.interfaces import ResourceRepository

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, session: Session, resource_repo: ResourceRepository):
        self._session: Session = session
        self._resource_repo: ResourceRepository = resource_repo

    def create_resource(
        self,
        name: str,
        resource_type: ResourceType = ResourceType.INDIVIDUAL,
        hourly_cost: float = 0.0,
    ) -> Resource:
        if not name or not name.strip():
            raise ValidationError("Resource name cannot be empty.", code="RESOURCE_NAME_EMPTY")
        if hourly_cost < 0:
            raise ValidationError("Hourly cost cannot be negative.", code="RESOURCE_COST_NEGATIVE")

        resource = Resource.create(
            name=name.strip(),
            resource_type=ResourceType(resource_type),
            hourly_cost=float(hourly_cost),
        )
        try:
            self._resource_repo.add(resource)
            self._session.commit()
            logger.info("Created resource %s - %s", resource.id, resource.name)
            return resource
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating resource: %s", e)
            raise

    def list_resources(self):
        return self._resource_repo.list_all()


__all__ = ["ResourceService"]
