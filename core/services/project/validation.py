from __future__ import annotations

from datetime import date
from typing import Optional

from core.exceptions import ValidationError
from core.interfaces import ProjectRepository


class ProjectValidationMixin:
    _project_repo: ProjectRepository

    def _validate_project_code(self, code: str) -> None:
        if not code or not code.strip():
            raise ValidationError("Project code cannot be empty.", code="PROJECT_CODE_EMPTY")
        if self._project_repo.get_by_code(code.strip()) is not None:
            raise ValidationError("A project with this code already exists.", code="PROJECT_CODE_DUPLICATE")

    def _validate_project_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Project name cannot be empty.", code="PROJECT_NAME_EMPTY")

    def _validate_project_dates(self, start_date: date, end_date: Optional[date]) -> None:
        if start_date is None:
            raise ValidationError("Project start date is required.", code="PROJECT_START_REQUIRED")
        if end_date is not None and end_date < start_date:
            raise ValidationError("Project end date is before its start date.", code="PROJECT_DATES_INVERTED")

    def _validate_project_amounts(self, contract_total: Optional[float], actual_cost: Optional[float]) -> None:
        if contract_total is not None and contract_total < 0:
            raise ValidationError("Contract total cannot be negative.", code="PROJECT_CONTRACT_NEGATIVE")
        if actual_cost is not None and actual_cost < 0:
            raise ValidationError("Actual cost cannot be negative.", code="PROJECT_ACTUAL_COST_NEGATIVE")


__all__ = ["ProjectValidationMixin"]
