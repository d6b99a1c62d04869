from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.domain.enums import RECOGNIZED_VALORIZATION_STATUSES, ValorizationStatus
from core.domain.common import generate_id


@dataclass
class Valorization:
    """Progress-billing record for one period of a project."""

    id: str
    project_id: str
    number: int
    period_start: date
    period_end: date
    amount: float
    status: ValorizationStatus = ValorizationStatus.DRAFT
    version: int = 1

    @property
    def is_recognized(self) -> bool:
        return self.status in RECOGNIZED_VALORIZATION_STATUSES

    @staticmethod
    def create(
        project_id: str,
        number: int,
        period_start: date,
        period_end: date,
        amount: float,
        status: ValorizationStatus = ValorizationStatus.DRAFT,
    ) -> "Valorization":
        return Valorization(
            id=generate_id(),
            project_id=project_id,
            number=number,
            period_start=period_start,
            period_end=period_end,
            amount=amount,
            status=status,
        )


__all__ = ["Valorization"]
