from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.domain import Project
from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository
from core.services.project.validation import ProjectValidationMixin

logger = logging.getLogger(__name__)


class ProjectService(ProjectValidationMixin):
    def __init__(self, session: Session, project_repo: ProjectRepository):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo

    def create_project(
        self,
        code: str,
        name: str,
        start_date: date,
        end_date: Optional[date] = None,
        contract_total: Optional[float] = None,
        actual_cost: Optional[float] = None,
        currency: Optional[str] = None,
    ) -> Project:
        self._validate_project_code(code)
        self._validate_project_name(name)
        self._validate_project_dates(start_date, end_date)
        self._validate_project_amounts(contract_total, actual_cost)

        project = Project.create(
            code=code.strip(),
            name=name.strip(),
            start_date=start_date,
            end_date=end_date,
            contract_total=contract_total,
            actual_cost=actual_cost,
            currency=(currency or "").strip().upper() or None,
        )
        try:
            self._project_repo.add(project)
            self._session.commit()
            logger.info("Created project %s - %s", project.code, project.name)
            return project
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating project: %s", e)
            raise

    def get_project(self, project_id: str) -> Project:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        return project

    def list_projects(self) -> List[Project]:
        return self._project_repo.list_all()


__all__ = ["ProjectService"]
