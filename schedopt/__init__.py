"""Relocate lessons in a weekly timetable to close teachers' idle gaps."""

from .config import OptimizerSettings
from .errors import InvalidScheduleFormat, ScheduleError
from .scheduler import OptimizationResult, optimize_schedule

__all__ = [
    "OptimizerSettings",
    "ScheduleError",
    "InvalidScheduleFormat",
    "OptimizationResult",
    "optimize_schedule",
]
