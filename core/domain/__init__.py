from core.domain.enums import (
    RECOGNIZED_VALORIZATION_STATUSES,
    ResourceType,
    ScheduleType,
    ValorizationStatus,
)
from core.domain.common import generate_id, utc_now
from core.domain.project import Project
from core.domain.resource import Resource
from core.domain.schedule import Schedule
from core.domain.task import Task
from core.domain.valorization import Valorization

__all__ = [
    "generate_id",
    "utc_now",
    "ScheduleType",
    "ResourceType",
    "ValorizationStatus",
    "RECOGNIZED_VALORIZATION_STATUSES",
    "Project",
    "Schedule",
    "Resource",
    "Task",
    "Valorization",
]
