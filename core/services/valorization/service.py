from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.domain import Valorization, ValorizationStatus
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import ProjectRepository, ValorizationRepository

logger = logging.getLogger(__name__)


class ValorizationService:
    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        valorization_repo: ValorizationRepository,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._valorization_repo: ValorizationRepository = valorization_repo

    def register_valorization(
        self,
        project_id: str,
        period_start: date,
        period_end: date,
        amount: float,
        status: ValorizationStatus = ValorizationStatus.DRAFT,
        number: Optional[int] = None,
    ) -> Valorization:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        if amount is None or amount < 0:
            raise ValidationError("Valorization amount cannot be negative.", code="VALORIZATION_AMOUNT_NEGATIVE")
        if period_end < period_start:
            raise ValidationError(
                "Valorization period ends before it starts.",
                code="VALORIZATION_PERIOD_INVERTED",
            )

        existing = self._valorization_repo.list_by_project(project_id)
        if number is None:
            number = max((v.number for v in existing), default=0) + 1
        elif any(v.number == number for v in existing):
            raise ValidationError(
                f"Valorization number {number} already exists for this project.",
                code="VALORIZATION_NUMBER_DUPLICATE",
            )

        valorization = Valorization.create(
            project_id=project_id,
            number=number,
            period_start=period_start,
            period_end=period_end,
            amount=float(amount),
            status=ValorizationStatus(status),
        )
        try:
            self._valorization_repo.add(valorization)
            self._session.commit()
            logger.info(
                "Registered valorization #%s for project %s (%.2f, %s)",
                valorization.number,
                project_id,
                valorization.amount,
                valorization.status.value,
            )
            return valorization
        except Exception as e:
            self._session.rollback()
            logger.error("Error registering valorization: %s", e)
            raise

    def set_status(self, valorization_id: str, status: ValorizationStatus) -> Valorization:
        valorization = self._valorization_repo.get(valorization_id)
        if not valorization:
            raise NotFoundError("Valorization not found.", code="VALORIZATION_NOT_FOUND")
        if valorization.status == ValorizationStatus.CANCELLED:
            raise BusinessRuleError("A cancelled valorization cannot change state.", code="VALORIZATION_CANCELLED")

        valorization.status = ValorizationStatus(status)
        try:
            self._valorization_repo.update(valorization)
            self._session.commit()
            logger.info("Valorization %s moved to %s", valorization.id, valorization.status.value)
            return valorization
        except Exception as e:
            self._session.rollback()
            logger.error("Error updating valorization status: %s", e)
            raise

    def list_valorizations(self, project_id: str) -> List[Valorization]:
        return self._valorization_repo.list_by_project(project_id)


__all__ = ["ValorizationService"]
