from .curve_s import CurveSService
from .project import ProjectService
from .resource import ResourceService
from .schedule import ScheduleService
from .valorization import ValorizationService

__all__ = [
    "CurveSService",
    "ProjectService",
    "ResourceService",
    "ScheduleService",
    "ValorizationService",
]
