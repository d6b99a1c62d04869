from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.common import generate_id


@dataclass
class Task:
    id: str
    schedule_id: str
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    estimated_hours: float = 0.0
    estimated_headcount: int = 1
    resource_id: Optional[str] = None

    @property
    def is_dated(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    @staticmethod
    def create(schedule_id: str, name: str, **extra) -> "Task":
        return Task(
            id=generate_id(),
            schedule_id=schedule_id,
            name=name,
            **extra,
        )


__all__ = ["Task"]
