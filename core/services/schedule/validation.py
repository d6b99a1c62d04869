from __future__ import annotations

from datetime import date
from typing import Optional

from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ResourceRepository


class TaskValidationMixin:
    _resource_repo: ResourceRepository

    def _validate_task_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Task name cannot be empty.", code="TASK_NAME_EMPTY")

    def _validate_task_dates(self, start_date: Optional[date], end_date: Optional[date]) -> None:
        if start_date and end_date and end_date < start_date:
            raise ValidationError("Task end date is before its start date.", code="TASK_DATES_INVERTED")

    def _validate_task_effort(self, estimated_hours: float, estimated_headcount: int) -> None:
        if estimated_hours < 0:
            raise ValidationError("Estimated hours cannot be negative.", code="TASK_HOURS_NEGATIVE")
        if estimated_headcount < 1:
            raise ValidationError("Estimated headcount must be at least 1.", code="TASK_HEADCOUNT_INVALID")

    def _validate_task_resource(self, resource_id: Optional[str]) -> None:
        if resource_id is None:
            return
        if self._resource_repo.get(resource_id) is None:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")


__all__ = ["TaskValidationMixin"]
