from .accumulation import accumulate_buckets
from .buckets import build_week_buckets
from .distribution import distribute_task_cost_by_week, task_planned_cost
from .engine import compute_curve_s, covering_range, select_schedule
from .evm import calculate_evm, interpret_evm
from .models import CurveSResult, CurveSSnapshot, EVMResult, PlannedTask, WeekBucket
from .placement import place_valorization_in_week
from .service import CurveSService

__all__ = [
    "CurveSService",
    "CurveSResult",
    "CurveSSnapshot",
    "EVMResult",
    "PlannedTask",
    "WeekBucket",
    "build_week_buckets",
    "task_planned_cost",
    "distribute_task_cost_by_week",
    "place_valorization_in_week",
    "accumulate_buckets",
    "calculate_evm",
    "interpret_evm",
    "select_schedule",
    "covering_range",
    "compute_curve_s",
]
