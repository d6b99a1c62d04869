from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.curve_s import CurveSService
from core.services.project import ProjectService
from core.services.resource import ResourceService
from core.services.schedule import ScheduleService
from core.services.valorization import ValorizationService
from infra.db.repositories import (
    SqlAlchemyProjectRepository,
    SqlAlchemyResourceRepository,
    SqlAlchemyScheduleRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyValorizationRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    project_service: ProjectService
    resource_service: ResourceService
    schedule_service: ScheduleService
    valorization_service: ValorizationService
    curve_s_service: CurveSService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "project_service": self.project_service,
            "resource_service": self.resource_service,
            "schedule_service": self.schedule_service,
            "valorization_service": self.valorization_service,
            "curve_s_service": self.curve_s_service,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    project_repo = SqlAlchemyProjectRepository(session)
    schedule_repo = SqlAlchemyScheduleRepository(session)
    task_repo = SqlAlchemyTaskRepository(session)
    resource_repo = SqlAlchemyResourceRepository(session)
    valorization_repo = SqlAlchemyValorizationRepository(session)

    return ServiceGraph(
        session=session,
        project_service=ProjectService(session, project_repo),
        resource_service=ResourceService(session, resource_repo),
        schedule_service=ScheduleService(
            session,
            project_repo,
            schedule_repo,
            task_repo,
            resource_repo,
        ),
        valorization_service=ValorizationService(session, project_repo, valorization_repo),
        curve_s_service=CurveSService(
            project_repo,
            schedule_repo,
            task_repo,
            resource_repo,
            valorization_repo,
        ),
    )


__all__ = ["ServiceGraph", "build_service_graph"]
