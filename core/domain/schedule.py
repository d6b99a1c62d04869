from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from core.domain.enums import ScheduleType
from core.domain.common import generate_id, utc_now


@dataclass
class Schedule:
    id: str
    project_id: str
    name: str
    schedule_type: ScheduleType = ScheduleType.PLANNING
    is_baseline: bool = False
    created_at: datetime = field(default_factory=utc_now)
    version: int = 1

    @staticmethod
    def create(
        project_id: str,
        name: str,
        schedule_type: ScheduleType = ScheduleType.PLANNING,
        is_baseline: bool = False,
    ) -> "Schedule":
        return Schedule(
            id=generate_id(),
            project_id=project_id,
            name=name.strip() or "Schedule",
            schedule_type=schedule_type,
            is_baseline=is_baseline,
        )


__all__ = ["Schedule"]
