from .compact import STRATEGIES, FixpointSweep, GapReductionStrategy, SingleSweep, reduce_gaps
from .consolidate import consolidate_days
from .gaps import gaps_by_teacher, total_gaps
from .grouping import build_teacher_day_index
from .pipeline import OptimizationResult, optimize_schedule
from .shift import shift_days_up

__all__ = [
    "build_teacher_day_index",
    "total_gaps",
    "gaps_by_teacher",
    "shift_days_up",
    "reduce_gaps",
    "consolidate_days",
    "GapReductionStrategy",
    "SingleSweep",
    "FixpointSweep",
    "STRATEGIES",
    "optimize_schedule",
    "OptimizationResult",
]
