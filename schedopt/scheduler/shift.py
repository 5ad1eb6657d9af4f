from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..config import OptimizerSettings
from ..models.change import REASON_DAY_START, SHIFT, ChangeRecord
from ..models.slot_key import format_key
from ..models.timetable import Schedule
from .grouping import build_teacher_day_index, iter_teacher_days
from .moves import relocate

logger = logging.getLogger(__name__)


def shift_days_up(
    schedule: Schedule,
    changes: Sequence[ChangeRecord],
    settings: OptimizerSettings | None = None,
) -> Tuple[Schedule, List[ChangeRecord]]:
    """Slide each teacher-day up so its first lesson sits in the earliest period.

    A teacher-day moves as a block or not at all: if any target slot is held
    by something other than the block's own lessons, the day is left as is.
    """
    settings = settings or OptimizerSettings()
    out = schedule.copy()
    log = list(changes)
    moved = 0
    aborted = 0
    index = build_teacher_day_index(out)
    for teacher, day, periods in iter_teacher_days(index):
        shift = periods[0] - settings.earliest_period
        if shift <= 0:
            continue
        sources = {format_key(teacher, day, p) for p in periods}
        targets = [format_key(teacher, day, p - shift) for p in periods]
        missing = sorted(k for k in sources if not out.occupied(k))
        if missing:
            logger.warning(
                "Not shifting %s day %d: lesson not stored under %s", teacher, day, missing[0]
            )
            aborted += 1
            continue
        blocked = [k for k in targets if out.occupied(k) and k not in sources]
        if blocked:
            logger.debug(
                "Not shifting %s day %d up by %d: %s occupied", teacher, day, shift, blocked[0]
            )
            aborted += 1
            continue
        # Ascending order: every target below p has been vacated already
        for p in periods:
            rec = relocate(
                out,
                teacher,
                format_key(teacher, day, p),
                format_key(teacher, day, p - shift),
                SHIFT,
                REASON_DAY_START,
            )
            if rec is not None:
                log.append(rec)
                moved += 1
    logger.info("Day start alignment: %d lesson(s) moved, %d day(s) blocked", moved, aborted)
    return out, log
