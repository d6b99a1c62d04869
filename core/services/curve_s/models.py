from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from core.domain import Project, Resource, Schedule, Task, Valorization


@dataclass
class WeekBucket:
    week_start: date
    week_end: date
    label: str
    pv: float = 0.0
    ev: float = 0.0
    pv_cumulative: float = 0.0
    ev_cumulative: float = 0.0

    def contains(self, day: date) -> bool:
        return self.week_start <= day <= self.week_end

    def as_dict(self) -> dict[str, Any]:
        return {
            "weekStart": self.week_start.isoformat(),
            "weekEnd": self.week_end.isoformat(),
            "label": self.label,
            "pv": self.pv,
            "ev": self.ev,
            "pvCumulative": self.pv_cumulative,
            "evCumulative": self.ev_cumulative,
        }


@dataclass(frozen=True)
class EVMResult:
    spi: Optional[float]
    sv: float
    cpi: Optional[float]
    cv: Optional[float]
    pv_total: float
    ev_total: float
    bac: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "spi": self.spi,
            "sv": self.sv,
            "cpi": self.cpi,
            "cv": self.cv,
            "pvTotal": self.pv_total,
            "evTotal": self.ev_total,
            "bac": self.bac,
        }


@dataclass(frozen=True)
class PlannedTask:
    """A schedule task paired with the resource that prices it."""

    task: Task
    resource: Resource


@dataclass(frozen=True)
class CurveSSnapshot:
    """Immutable input of one curve computation, assembled by the caller."""

    project: Project
    bac: float
    schedule: Optional[Schedule] = None
    has_baseline: bool = False
    tasks: tuple[PlannedTask, ...] = ()
    valorizations: tuple[Valorization, ...] = ()
    actual_cost: Optional[float] = None


@dataclass
class CurveSResult:
    weeks: list[WeekBucket]
    bac: float
    evm: EVMResult
    has_baseline: bool
    schedule_id: Optional[str]
    project: Project
    notes: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "weeks": [w.as_dict() for w in self.weeks],
            "bac": self.bac,
            "evm": self.evm.as_dict(),
            "hasBaseline": self.has_baseline,
            "scheduleId": self.schedule_id,
            "project": {
                "id": self.project.id,
                "code": self.project.code,
                "name": self.project.name,
            },
        }


__all__ = [
    "WeekBucket",
    "EVMResult",
    "PlannedTask",
    "CurveSSnapshot",
    "CurveSResult",
]
