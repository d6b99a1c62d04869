from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.common import generate_id


@dataclass
class Project:
    id: str
    code: str
    name: str
    start_date: date
    end_date: Optional[date] = None
    contract_total: Optional[float] = None  # client contractual total, source of BAC
    actual_cost: Optional[float] = None
    currency: Optional[str] = None

    @property
    def bac(self) -> Optional[float]:
        if self.contract_total is None:
            return None
        return float(self.contract_total)

    @staticmethod
    def create(code: str, name: str, start_date: date, **extra) -> "Project":
        return Project(
            id=generate_id(),
            code=code,
            name=name,
            start_date=start_date,
            **extra,
        )


__all__ = ["Project"]
