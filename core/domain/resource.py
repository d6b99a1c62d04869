from __future__ import annotations

from dataclasses import dataclass

from core.domain.enums import ResourceType
from core.domain.common import generate_id


@dataclass
class Resource:
    id: str
    name: str
    resource_type: ResourceType = ResourceType.INDIVIDUAL
    hourly_cost: float = 0.0

    @property
    def is_crew(self) -> bool:
        return self.resource_type == ResourceType.CREW

    @staticmethod
    def create(
        name: str,
        resource_type: ResourceType = ResourceType.INDIVIDUAL,
        hourly_cost: float = 0.0,
    ) -> "Resource":
        return Resource(
            id=generate_id(),
            name=name,
            resource_type=resource_type,
            hourly_cost=hourly_cost,
        )


__all__ = ["Resource"]
