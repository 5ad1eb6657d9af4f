from __future__ import annotations

import bisect
import logging
from typing import Dict, List, Sequence, Tuple

from ..config import OptimizerSettings
from ..models.change import CONSOLIDATION, REASON_CONSOLIDATION, ChangeRecord
from ..models.slot_key import format_key
from ..models.timetable import Schedule
from .grouping import build_teacher_day_index
from .moves import relocate

logger = logging.getLogger(__name__)


def _first_free_slot(
    schedule: Schedule,
    teacher: str,
    days: Dict[int, List[int]],
    target_days: List[int],
    max_periods: int,
) -> Tuple[int, int] | None:
    for day in target_days:
        taken = days[day]
        for period in range(1, max_periods + 1):
            if period in taken:
                continue
            if not schedule.occupied(format_key(teacher, day, period)):
                return day, period
    return None


def consolidate_days(
    schedule: Schedule,
    changes: Sequence[ChangeRecord],
    settings: OptimizerSettings | None = None,
) -> Tuple[Schedule, List[ChangeRecord]]:
    """Move lessons off a teacher's sparse days onto the same teacher's full days.

    Sparse days hold fewer than ``lesson_threshold`` lessons; full days hold
    at least that many and receive lessons in their first free period. A
    sparse day that cannot be emptied completely keeps what is left.
    """
    settings = settings or OptimizerSettings()
    out = schedule.copy()
    log = list(changes)
    start = len(log)
    stranded = 0
    index = build_teacher_day_index(out)
    for teacher in sorted(index):
        days = index[teacher]
        candidates = [
            (day, list(days[day]))
            for day in sorted(days)
            if 0 < len(days[day]) < settings.lesson_threshold
        ]
        targets = [day for day in sorted(days) if len(days[day]) >= settings.lesson_threshold]
        if not candidates or not targets:
            continue
        for day, periods in candidates:
            # Backwards so deleting periods[i] keeps earlier indices valid
            for i in range(len(periods) - 1, -1, -1):
                from_key = format_key(teacher, day, periods[i])
                slot = _first_free_slot(out, teacher, days, targets, settings.max_periods)
                if slot is None:
                    logger.debug("No free slot on a full day for %s", from_key)
                    stranded += 1
                    continue
                to_day, to_period = slot
                rec = relocate(
                    out,
                    teacher,
                    from_key,
                    format_key(teacher, to_day, to_period),
                    CONSOLIDATION,
                    REASON_CONSOLIDATION,
                )
                if rec is None:
                    continue
                log.append(rec)
                del periods[i]
                bisect.insort(days[to_day], to_period)
            days[day] = periods
    logger.info(
        "Day consolidation: %d lesson(s) moved, %d left in place",
        len(log) - start,
        stranded,
    )
    return out, log
