from __future__ import annotations

from typing import Dict, List

from ..models.timetable import Schedule
from .grouping import build_teacher_day_index


def day_gaps(periods: List[int]) -> int:
    # periods must be ascending
    return sum(max(0, periods[i] - periods[i - 1] - 1) for i in range(1, len(periods)))


def gaps_by_teacher(schedule: Schedule) -> Dict[str, int]:
    index = build_teacher_day_index(schedule)
    return {
        teacher: sum(day_gaps(periods) for periods in days.values())
        for teacher, days in sorted(index.items())
    }


def total_gaps(schedule: Schedule) -> int:
    """Idle periods between a teacher's lessons on the same day, summed.

    Leading periods before the first lesson are not counted.
    """
    return sum(gaps_by_teacher(schedule).values())
